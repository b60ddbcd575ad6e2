"""Pytest fixtures for the instance type generator tests."""
import pytest

from ec2_catalog.clients.catalog_fetcher import CatalogFetcher

from catalog_helpers import BASE_URL, FakeSession


@pytest.fixture
def fake_fetcher():
    """Factory for a CatalogFetcher backed by a FakeSession."""
    def _make(outcomes, timeout=None):
        return CatalogFetcher(base_url=BASE_URL, timeout=timeout, session=FakeSession(outcomes))
    return _make
