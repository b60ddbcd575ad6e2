"""
Enumerate the AWS regions whose pricing catalogs should be fetched.

Regions come from the endpoint directory bundled with botocore, so the set of
regions follows the installed botocore release.
"""
import logging
from typing import Iterable, List, Optional

import boto3
from botocore.exceptions import BotoCoreError

from ec2_catalog.models.errors import RegionEnumerationError

logger = logging.getLogger(__name__)

EC2_SERVICE_NAME = "ec2"


class RegionEnumerator:
    def __init__(self, session: Optional[boto3.session.Session] = None, service_name: str = EC2_SERVICE_NAME):
        """
        Args:
            session: boto3 session used to read the endpoint directory. A new one is created if omitted.
            service_name: Service whose regions are listed
        """
        self._session = session
        self.service_name = service_name

    @property
    def session(self) -> boto3.session.Session:
        if self._session is None:
            try:
                self._session = boto3.session.Session()
            except BotoCoreError as e:
                raise RegionEnumerationError(f"Failed to load the AWS endpoint directory: {e}") from e
        return self._session

    def list_partitions(self) -> List[str]:
        try:
            return list(self.session.get_available_partitions())
        except BotoCoreError as e:
            raise RegionEnumerationError(f"Failed to list AWS partitions: {e}") from e

    def list_regions(self, partitions: Optional[Iterable[str]] = None) -> List[str]:
        """
        List regions of every partition, or of the given partitions only.

        Partitions keep the directory's order and regions are sorted within a
        partition, which fixes the order in which catalogs are merged.

        Args:
            partitions: Optional partition names to restrict the listing to

        Returns:
            List of unique region identifiers

        Raises:
            RegionEnumerationError: If the directory cannot be read, a requested
                partition is unknown, or no region is found
        """
        known = self.list_partitions()
        if partitions:
            requested = list(dict.fromkeys(partitions))
            unknown = [p for p in requested if p not in known]
            if unknown:
                raise RegionEnumerationError(
                    f"Unknown partition(s) {', '.join(unknown)}; known partitions: {', '.join(known)}")
            selected = requested
        else:
            selected = known

        regions = []
        for partition in selected:
            try:
                partition_regions = self.session.get_available_regions(self.service_name, partition_name=partition)
            except BotoCoreError as e:
                raise RegionEnumerationError(f"Failed to list regions of partition {partition}: {e}") from e
            logger.debug(f"Partition {partition}: {len(partition_regions)} regions")
            for region in sorted(partition_regions):
                if region not in regions:
                    regions.append(region)

        if not regions:
            raise RegionEnumerationError(f"No {self.service_name} regions found in partitions: {', '.join(selected)}")

        logger.info(f"Found {len(regions)} regions across {len(selected)} partitions")
        return regions
