#!/usr/bin/env python3
"""
Generate the EC2 instance type table for the cluster-autoscaler AWS provider.

The EC2 offer file of every region known to botocore is downloaded from the
public pricing endpoint, the instance type attributes are merged into one
table, and the table is written as Go source.

USAGE:
    python3 run_pipeline.py [-v N] [--output PATH] [--region ID ...]

Regions that cannot be fetched are skipped with a warning. The script exits
with status 1 when the region directory cannot be read, a catalog value
cannot be parsed, or the output file cannot be written.
"""
import argparse
import logging
import sys

from ec2_catalog.clients.catalog_fetcher import CatalogFetcher
from ec2_catalog.clients.region_enumerator import RegionEnumerator
from ec2_catalog.emitter import GoTableEmitter
from ec2_catalog.models.errors import InstanceCatalogError
from ec2_catalog.pipeline import run_pipeline
from ec2_catalog.utils.config import (
    get_output_path,
    get_package_name,
    get_pricing_base_url,
    get_request_timeout,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Generate the EC2 instance type table from the AWS pricing catalog")

    parser.add_argument("-v", "--verbosity", type=int, default=0,
                        help="Log verbosity; 1 or higher also logs every fetched URL (default: 0)")

    output_group = parser.add_argument_group("Output")
    output_group.add_argument("--output", help=f"Generated file path (default: {get_output_path()})")
    output_group.add_argument("--package-name", help=f"Go package name (default: {get_package_name()})")

    source_group = parser.add_argument_group("Pricing catalog")
    source_group.add_argument("--pricing-url", help=f"Pricing endpoint (default: {get_pricing_base_url()})")
    source_group.add_argument("--timeout", type=float, help="Seconds to wait for each catalog (default: no timeout)")
    source_group.add_argument("--partition", action="append", dest="partitions",
                              help="Only fetch regions of this partition; may be repeated")
    source_group.add_argument("--region", action="append", dest="regions",
                              help="Fetch this region instead of enumerating them; may be repeated")

    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")
    return args


def configure_logging(verbosity: int):
    logging.basicConfig(
        level=logging.DEBUG if verbosity > 0 else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def main(argv=None):
    """Run the generator and return the process exit status."""
    args = parse_args(argv)
    configure_logging(args.verbosity)

    try:
        timeout = args.timeout if args.timeout is not None else get_request_timeout()
        if args.regions:
            regions = list(dict.fromkeys(args.regions))
            logger.info(f"Using {len(regions)} regions from the command line")
        else:
            regions = RegionEnumerator().list_regions(args.partitions)

        fetcher = CatalogFetcher(base_url=args.pricing_url, timeout=timeout)
        emitter = GoTableEmitter(output_path=args.output, package_name=args.package_name)
        try:
            run_pipeline(regions, fetcher, emitter)
        finally:
            fetcher.close()
    except (InstanceCatalogError, ValueError) as e:
        logger.error(f"Instance type generation failed: {e}")
        return 1

    logger.info("Instance type generation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
