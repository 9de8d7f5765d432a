"""
CSV report of maintainership per repository.
"""

import csv
import io
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from maintainer_report.types.issues import Issue
from maintainer_report.types.report import ReportRow
from maintainer_report.types.repos import Collaborator, Repository

HEADER = ["Repository Name", "Has Maintainers?", "Current Maintainers", "Open Issues", "Repository URL"]
HEADER_WITHOUT_ISSUES = [column for column in HEADER if column != "Open Issues"]

LOGIN_SEPARATOR = "; "


def build_row(
    repo: Repository,
    collaborators: Iterable[Collaborator],
    issues: Sequence[Issue] | None = None,
) -> ReportRow:
    """Summarize one repository. ``issues=None`` leaves the issue count out."""
    maintainers = tuple(c.login for c in collaborators if c.is_maintainer)
    return ReportRow(
        repo_name=repo.name,
        has_maintainers=len(maintainers) > 0,
        maintainer_logins=maintainers,
        open_issue_count=len(issues) if issues is not None else None,
        repo_url=repo.html_url,
    )


def build_rows(
    repos: Iterable[Repository],
    collaborators_by_repo: Mapping[str, Sequence[Collaborator]],
    issues_by_repo: Mapping[str, Sequence[Issue]] | None = None,
) -> list[ReportRow]:
    """
    Build one row per repository, in the order of ``repos``.

    A repository missing from ``collaborators_by_repo`` has no collaborators;
    one missing from ``issues_by_repo`` has no open issues. When
    ``issues_by_repo`` is None, rows carry no issue count.
    """
    rows = []
    for repo in repos:
        issues = None
        if issues_by_repo is not None:
            issues = issues_by_repo.get(repo.name, ())
        rows.append(build_row(repo, collaborators_by_repo.get(repo.name, ()), issues))
    return rows


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def render_csv(rows: Iterable[ReportRow], include_issues: bool = True) -> str:
    """
    Serialize rows to CSV text with every field quoted.

    Args:
        rows: Report rows in output order
        include_issues: Emit the "Open Issues" column

    Returns:
        CSV text, header first, newline-terminated
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

    writer.writerow(HEADER if include_issues else HEADER_WITHOUT_ISSUES)
    for row in rows:
        fields = [
            row.repo_name,
            _format_bool(row.has_maintainers),
            LOGIN_SEPARATOR.join(row.maintainer_logins),
        ]
        if include_issues:
            fields.append(str(row.open_issue_count or 0))
        fields.append(row.repo_url)
        writer.writerow(fields)

    return buffer.getvalue()


def build_report(
    repos: Iterable[Repository],
    collaborators_by_repo: Mapping[str, Sequence[Collaborator]],
    issues_by_repo: Mapping[str, Sequence[Issue]] | None = None,
    include_issues: bool = True,
) -> str:
    """Build rows and render them as CSV text."""
    rows = build_rows(repos, collaborators_by_repo, issues_by_repo if include_issues else None)
    return render_csv(rows, include_issues=include_issues)


def write_report(text: str, path: str | Path) -> Path:
    """Write the report in one go, replacing any previous file."""
    path = Path(path)
    with open(path, "w", newline="", encoding="utf-8") as fd:
        fd.write(text)
    return path
