"""
Report run: list repositories, fetch their collaborators and issues, write the CSV.
"""

from maintainer_report.client import GitHubClient
from maintainer_report.config import ReportConfig
from maintainer_report.logging import get_logger
from maintainer_report.report import build_rows, render_csv, write_report
from maintainer_report.types.issues import Issue
from maintainer_report.types.report import ReportRow
from maintainer_report.types.repos import Collaborator

logger = get_logger("report")


def run_report(client: GitHubClient, config: ReportConfig) -> list[ReportRow]:
    """
    Produce the maintainers report for ``config.org``.

    Repositories are processed one at a time. The CSV is written once, after
    every repository has been fetched, so a failure leaves no partial file.

    Args:
        client: GitHub client to fetch through
        config: Report configuration

    Returns:
        The rows written to ``config.output_path``

    Raises:
        FetchError: On any fatal API error
    """
    repos = client.repos.list_public(config.org, exclude=config.exclude_repos)
    logger.info("Fetched %d public repos from %s.", len(repos), config.org)

    collaborators_by_repo: dict[str, list[Collaborator]] = {}
    issues_by_repo: dict[str, list[Issue]] | None = {} if config.include_issues else None

    for index, repo in enumerate(repos, start=1):
        collaborators = client.collaborators.list_outside(config.org, repo.name)
        collaborators_by_repo[repo.name] = collaborators

        if issues_by_repo is not None:
            issues = client.issues.list_open(config.org, repo.name)
            issues_by_repo[repo.name] = issues
            logger.info(
                "[%d/%d] %s: %d outside collaborators, %d open issues",
                index,
                len(repos),
                repo.name,
                len(collaborators),
                len(issues),
            )
        else:
            logger.info(
                "[%d/%d] %s: %d outside collaborators",
                index,
                len(repos),
                repo.name,
                len(collaborators),
            )

    rows = build_rows(repos, collaborators_by_repo, issues_by_repo)
    path = write_report(render_csv(rows, include_issues=config.include_issues), config.output_path)
    logger.info("Wrote %d rows to %s.", len(rows), path)
    return rows
