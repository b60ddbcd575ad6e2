"""Tests for the pricing catalog client."""
import pytest
import requests

from ec2_catalog.clients.catalog_fetcher import CatalogFetcher
from ec2_catalog.models.errors import CatalogFetchError

from catalog_helpers import BASE_URL, FakeSession, catalog, make_response


def test_url_for_region():
    fetcher = CatalogFetcher(base_url="https://pricing.us-east-1.amazonaws.com/", session=FakeSession({}))
    assert fetcher.url_for("eu-west-1") == (
        "https://pricing.us-east-1.amazonaws.com/offers/v1.0/aws/AmazonEC2/current/eu-west-1/index.json")


def test_url_for_empty_region():
    fetcher = CatalogFetcher(base_url=BASE_URL, session=FakeSession({}))
    with pytest.raises(ValueError):
        fetcher.url_for("")


def test_default_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("PRICING_BASE_URL", "https://pricing.cn-north-1.amazonaws.com.cn")
    fetcher = CatalogFetcher(session=FakeSession({}))
    assert fetcher.url_for("cn-north-1").startswith("https://pricing.cn-north-1.amazonaws.com.cn/offers/")


def test_fetch_decodes_products(fake_fetcher):
    fetcher = fake_fetcher({"us-east-1": catalog({"instanceType": "m5.large", "vcpu": "2", "memory": "8 GiB"})},
                           timeout=30)
    document = fetcher.fetch("us-east-1")
    [product] = document.products.values()
    assert product.attributes.instance_type == "m5.large"
    assert product.attributes.memory == "8 GiB"
    assert product.attributes.gpu is None
    assert fetcher.session.requested == [(fetcher.url_for("us-east-1"), 30)]


@pytest.mark.parametrize("outcome, message", [
    (requests.ConnectionError("connection refused"), "request failed"),
    (requests.exceptions.ChunkedEncodingError("connection broken"), "request failed"),
    (make_response(b"<Error>AccessDenied</Error>", status_code=403), "HTTP 403"),
    (make_response(b"{\"products\": {"), "invalid JSON"),
    (make_response(b"<html>Service Unavailable</html>"), "invalid JSON"),
    (make_response({"formatVersion": "v1.0"}), "unexpected document shape"),
    (make_response({"products": ["not", "a", "mapping"]}), "unexpected document shape"),
])
def test_fetch_failures_are_recoverable_errors(fake_fetcher, outcome, message):
    fetcher = fake_fetcher({"ap-south-2": outcome})
    with pytest.raises(CatalogFetchError) as exc_info:
        fetcher.fetch("ap-south-2")
    assert exc_info.value.region == "ap-south-2"
    assert message in str(exc_info.value)


def test_close_closes_session(fake_fetcher):
    fetcher = fake_fetcher({})
    fetcher.close()
    assert fetcher.session.closed
