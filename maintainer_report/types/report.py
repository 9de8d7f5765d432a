"""Report row data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportRow:
    """One report line per repository."""

    repo_name: str
    has_maintainers: bool
    maintainer_logins: tuple[str, ...]
    open_issue_count: int | None  # None when issues are left out of the report
    repo_url: str
