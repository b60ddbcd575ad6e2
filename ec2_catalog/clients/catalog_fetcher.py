"""
Client for the public AWS pricing offer files.
"""
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from ec2_catalog.models.catalog_schemas import CatalogDocument
from ec2_catalog.models.errors import CatalogFetchError
from ec2_catalog.utils.config import get_pricing_base_url

logger = logging.getLogger(__name__)

OFFER_PATH = "/offers/v1.0/aws/AmazonEC2/current/{region}/index.json"


class CatalogFetcher:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            base_url: Pricing endpoint, defaults to PRICING_BASE_URL
            timeout: Seconds to wait for a response, None waits indefinitely
            session: requests session to send requests with
        """
        self.base_url = (base_url or get_pricing_base_url()).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, region: str) -> str:
        if not region:
            raise ValueError("region must be a non-empty string")
        return self.base_url + OFFER_PATH.format(region=region)

    def fetch(self, region: str) -> CatalogDocument:
        """
        Fetch and decode the EC2 offer file of a region.

        The whole document is validated before it is returned, so a failure
        never yields a partial document.

        Args:
            region: Region identifier, e.g. "us-east-1"

        Returns:
            CatalogDocument: The decoded offer file

        Raises:
            CatalogFetchError: On transport errors, non-2xx responses, or a body
                that is not a JSON offer file
        """
        url = self.url_for(region)
        logger.debug(f"fetching {url}")

        try:
            with self.session.get(url, timeout=self.timeout) as response:
                response.raise_for_status()
                payload = response.json()
        except requests.HTTPError as e:
            raise CatalogFetchError(region=region, url=url, message=f"HTTP {e.response.status_code}") from e
        except requests.JSONDecodeError as e:
            raise CatalogFetchError(region=region, url=url, message=f"invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise CatalogFetchError(region=region, url=url, message=f"request failed: {e}") from e
        except ValueError as e:
            raise CatalogFetchError(region=region, url=url, message=f"invalid JSON: {e}") from e

        try:
            return CatalogDocument.model_validate(payload)
        except ValidationError as e:
            raise CatalogFetchError(
                region=region, url=url,
                message=f"unexpected document shape ({e.error_count()} errors)") from e

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
