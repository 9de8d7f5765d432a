"""
Command line entry point.

Run with: maintainer-report --org my-org
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import httpx

from maintainer_report import __version__
from maintainer_report.client import GitHubClient
from maintainer_report.config import ReportConfig
from maintainer_report.exceptions import ConfigurationError, MaintainerReportError
from maintainer_report.logging import configure_logging, get_logger
from maintainer_report.runner import run_report

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maintainer-report",
        description="Write a CSV of maintainership status for an organization's public repositories.",
    )
    parser.add_argument("--org", help="GitHub organization (default: $GITHUB_ORG or elizaOS-plugins)")
    parser.add_argument("-o", "--output", help="CSV file to write (default: maintainers.csv)")
    parser.add_argument(
        "--no-issues",
        dest="include_issues",
        action="store_false",
        default=True,
        help="Skip the open issue counts",
    )
    exclusion = parser.add_mutually_exclusive_group()
    exclusion.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        help="Repository to leave out; may repeat (default: .github)",
    )
    exclusion.add_argument(
        "--include-all",
        action="store_true",
        help="Do not leave any repository out",
    )
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds, 0 for none")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log every request")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """
    Run the report and return the process exit status.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        transport: Optional httpx transport handed to the client

    Returns:
        0 on success, 1 on a configuration, fetch or file write error
    """
    args = build_parser().parse_args(argv)

    configure_logging(
        level=logging.INFO,
        http_level=logging.DEBUG if args.verbose else logging.INFO,
    )

    exclude_repos = args.exclude
    if args.include_all:
        exclude_repos = []

    try:
        config = ReportConfig.from_env(
            org=args.org,
            output_path=args.output,
            include_issues=args.include_issues,
            exclude_repos=exclude_repos,
            timeout=args.timeout,
        )
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    logger.debug("Using %r", config)

    try:
        with GitHubClient.from_config(config, transport=transport) as client:
            run_report(client, config)
    except (MaintainerReportError, OSError) as e:
        print(f"Error in main: {e}", file=sys.stderr)
        return 1

    logger.info("Script completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
