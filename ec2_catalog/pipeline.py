"""
Fetch the EC2 pricing catalog of every region and generate the instance type table.
"""
import logging
from typing import Iterable, List

from pydantic import BaseModel, Field

from ec2_catalog.clients.catalog_fetcher import CatalogFetcher
from ec2_catalog.emitter import GoTableEmitter
from ec2_catalog.instance_table import InstanceTypeTable
from ec2_catalog.models.errors import CatalogFetchError, NoCatalogDataError

logger = logging.getLogger(__name__)


class PipelineSummary(BaseModel):
    """Outcome of one generator run."""
    regions_fetched: List[str] = Field(default_factory=list, description="Regions merged into the table")
    regions_skipped: List[str] = Field(default_factory=list, description="Regions whose catalog could not be fetched")
    records_merged: int = Field(0, description="Products describing an instance type")
    instance_types: int = Field(0, description="Distinct instance types in the table")
    output_path: str = Field("", description="Path of the generated file")


def build_table(regions: Iterable[str], fetcher: CatalogFetcher, table: InstanceTypeTable,
                summary: PipelineSummary) -> InstanceTypeTable:
    """
    Merge the catalogs of the given regions into the table, in order.

    A region whose catalog cannot be fetched is logged and skipped. Parse
    errors inside a fetched catalog propagate.
    """
    for region in regions:
        try:
            document = fetcher.fetch(region)
        except CatalogFetchError as e:
            logger.warning(f"Error fetching catalog for {region}: {e}, skipping...")
            summary.regions_skipped.append(region)
            continue

        merged = table.merge_document(document)
        summary.regions_fetched.append(region)
        summary.records_merged += merged
        logger.info(f"{region}: merged {merged} of {len(document.products)} products, {len(table)} instance types so far")
    return table


def run_pipeline(regions: Iterable[str], fetcher: CatalogFetcher, emitter: GoTableEmitter) -> PipelineSummary:
    """
    Build the table from all regions and write it with the emitter.

    Raises:
        NoCatalogDataError: If no region could be fetched
        CatalogParseError: If a catalog contains a value that cannot be parsed
        TableEmitError: If the output file cannot be written
    """
    regions = list(regions)
    summary = PipelineSummary()
    table = build_table(regions, fetcher, InstanceTypeTable(), summary)

    if not summary.regions_fetched:
        raise NoCatalogDataError(regions_attempted=len(regions))

    summary.instance_types = len(table)
    summary.output_path = emitter.emit(table.sorted_specs())

    logger.info(f"Regions fetched: {len(summary.regions_fetched)}, skipped: {len(summary.regions_skipped)}")
    if summary.regions_skipped:
        logger.info(f"Skipped regions: {', '.join(summary.regions_skipped)}")
    logger.info(f"Total instance types: {summary.instance_types}")
    return summary
