"""
Report configuration.

A ReportConfig is built once at process start and passed to every component.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from maintainer_report.exceptions import ConfigurationError
from maintainer_report.logging import mask_token

DEFAULT_ORG = "elizaOS-plugins"
DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_OUTPUT = "maintainers.csv"
DEFAULT_EXCLUDE = (".github",)
DEFAULT_TIMEOUT = 30.0
MAX_PER_PAGE = 100  # Maximum items per page from GitHub


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one report run."""

    token: str = field(repr=False)
    org: str = DEFAULT_ORG
    output_path: Path = Path(DEFAULT_OUTPUT)
    include_issues: bool = True
    exclude_repos: tuple[str, ...] = DEFAULT_EXCLUDE
    base_url: str = DEFAULT_BASE_URL
    per_page: int = MAX_PER_PAGE
    timeout: float | None = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"ReportConfig(token={mask_token(self.token)!r}, org={self.org!r}, "
            f"output_path={str(self.output_path)!r}, include_issues={self.include_issues}, "
            f"exclude_repos={self.exclude_repos!r}, base_url={self.base_url!r}, "
            f"per_page={self.per_page}, timeout={self.timeout})"
        )

    def validate(self) -> "ReportConfig":
        """
        Check the configuration before any network call.

        Raises:
            ConfigurationError: If a required value is missing or out of range
        """
        if not self.token:
            raise ConfigurationError(
                "GITHUB_TOKEN is not set. Please set GITHUB_TOKEN in your environment variables."
            )
        if not self.org:
            raise ConfigurationError("Organization name must not be empty")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise ConfigurationError(
                f"per_page must be between 1 and {MAX_PER_PAGE}, got {self.per_page}"
            )
        if not self.output_path.parent.is_dir():
            raise ConfigurationError(
                f"Output directory {str(self.output_path.parent)!r} does not exist"
            )
        return self

    def with_overrides(self, **overrides: Any) -> "ReportConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "output_path" in changes:
            changes["output_path"] = Path(changes["output_path"])
        if "exclude_repos" in changes:
            changes["exclude_repos"] = tuple(changes["exclude_repos"])
        return replace(self, **changes)

    @classmethod
    def from_env(cls, load_env_file: bool = True, **overrides: Any) -> "ReportConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            GITHUB_TOKEN: GitHub token (required)
            GITHUB_ORG: Organization to report on (optional, default: elizaOS-plugins)
            GITHUB_API_URL: API base URL (optional, default: https://api.github.com)
            MAINTAINER_REPORT_OUTPUT: Output CSV path (optional, default: maintainers.csv)

        A ``.env`` file in the working directory is loaded first; variables
        already present in the environment win.

        Args:
            load_env_file: Whether to read ``.env`` before looking at the environment
            **overrides: Field values that take precedence over the environment

        Returns:
            Validated ReportConfig

        Raises:
            ConfigurationError: If GITHUB_TOKEN is missing or a value is invalid
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        config = cls(
            token=os.environ.get("GITHUB_TOKEN", ""),
            org=os.environ.get("GITHUB_ORG", DEFAULT_ORG),
            output_path=Path(os.environ.get("MAINTAINER_REPORT_OUTPUT", DEFAULT_OUTPUT)),
            base_url=os.environ.get("GITHUB_API_URL", DEFAULT_BASE_URL),
        )
        return config.with_overrides(**overrides).validate()
