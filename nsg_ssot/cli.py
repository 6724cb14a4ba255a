"""Command line entry point running the security group sync."""

import argparse
import sys

from nsg_ssot import logger
from nsg_ssot.clients import NAMClient, NetboxClient
from nsg_ssot.config import Settings, configure_logging
from nsg_ssot.constants import DIMENSIONS
from nsg_ssot.exceptions import ConfigurationMissing, UpstreamFetchFailure
from nsg_ssot.jobs import process_groups


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="nsg-ssot", description="Reconcile NAM NSX security groups with NetBox IPAM prefix tags."
    )
    parser.add_argument(
        "dimension",
        nargs="?",
        default="all",
        choices=[*DIMENSIONS, "all"],
        help="Grouping dimension to reconcile.",
    )
    parser.add_argument(
        "--dryrun", action="store_true", default=None, help="Calculate the diff without writing to NAM."
    )
    parser.add_argument(
        "--disable",
        dest="enabled",
        action="store_false",
        default=None,
        help="Only discover the grouping keys, never create or update a security group.",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging.")
    return parser


def main(argv=None):
    """Run the sync and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    for option in ("dryrun", "enabled", "debug"):
        if getattr(args, option) is not None:
            setattr(settings, option, getattr(args, option))
    configure_logging(settings.debug)

    try:
        settings.validate()
    except ConfigurationMissing as err:
        logger.error(err.message)
        return 2

    dimensions = list(DIMENSIONS) if args.dimension == "all" else [args.dimension]
    exit_code = 0
    with NetboxClient(
        settings.ipam_url, settings.ipam_token, verify_ssl=settings.ipam_verify_ssl, timeout=settings.timeout
    ) as ipam, NAMClient(
        settings.nam_url, settings.nam_token, verify_ssl=settings.nam_verify_ssl, timeout=settings.timeout
    ) as nam:
        for dimension in dimensions:
            try:
                sync = process_groups(
                    nam, ipam, DIMENSIONS[dimension], enabled=settings.enabled, dryrun=settings.dryrun
                )
            except (ConfigurationMissing, UpstreamFetchFailure) as err:
                logger.error("Failed to process %s groups: %s", dimension, err)
                exit_code = 1
                continue
            if not sync.succeeded:
                logger.warning(
                    "Finished %s groups with failures for %s: %s",
                    dimension,
                    DIMENSIONS[dimension].name,
                    ", ".join(failure.key for failure in sync.failures),
                )
                exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
