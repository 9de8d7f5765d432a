"""Maintainer report - CSV of maintainership status across a GitHub organization."""

__version__ = "0.1.0"

from maintainer_report.client import GitHubClient
from maintainer_report.config import ReportConfig
from maintainer_report.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    FetchError,
    MaintainerReportError,
    NotFoundError,
    RateLimitedError,
    ServerError,
)
from maintainer_report.logging import configure_logging, get_logger
from maintainer_report.pagination import paginate
from maintainer_report.report import build_report, build_row, build_rows, render_csv, write_report
from maintainer_report.runner import run_report
from maintainer_report.transport import HTTPTransport
from maintainer_report.types import Collaborator, Issue, Permissions, ReportRow, Repository

__all__ = [
    "__version__",
    # Client
    "GitHubClient",
    "ReportConfig",
    "run_report",
    # Types
    "Repository",
    "Collaborator",
    "Permissions",
    "Issue",
    "ReportRow",
    # Exceptions
    "MaintainerReportError",
    "ConfigurationError",
    "FetchError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    # Report
    "build_row",
    "build_rows",
    "build_report",
    "render_csv",
    "write_report",
    # Transport
    "HTTPTransport",
    "paginate",
    # Logging
    "configure_logging",
    "get_logger",
]
