"""
Pytest fixtures and factories for maintainer report tests.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from maintainer_report.config import ReportConfig
from maintainer_report.testing.fake_api import FakeGitHubAPI
from maintainer_report.types.issues import Issue
from maintainer_report.types.repos import Collaborator, Permissions, Repository


# ============================================================================
# Factories
# ============================================================================


def create_mock_repository(
    name: str = "mock-repo",
    org: str = "test-org",
    archived: bool = False,
) -> Repository:
    """Create a Repository with sensible defaults."""
    return Repository(name=name, html_url=f"https://github.com/{org}/{name}", archived=archived)


def create_mock_collaborator(login: str = "octocat", maintain: bool | None = False) -> Collaborator:
    """Create a Collaborator. ``maintain=None`` gives one without permissions."""
    if maintain is None:
        return Collaborator(login=login)
    return Collaborator(
        login=login,
        permissions=Permissions(admin=False, maintain=maintain, push=True, pull=True),
    )


def create_mock_issue(number: int = 1, repo: str = "mock-repo", pull_request: bool = False) -> Issue:
    """Create an Issue, or a pull request as the issues endpoint returns it."""
    return Issue(
        url=f"https://api.github.com/repos/test-org/{repo}/issues/{number}",
        user_login="octocat",
        pull_request={"url": f"https://api.github.com/repos/test-org/{repo}/pulls/{number}"}
        if pull_request
        else None,
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def fake_api() -> Generator[FakeGitHubAPI, None, None]:
    """
    Provide an empty FakeGitHubAPI for organization "test-org".

    Example:
        ```python
        def test_listing(fake_api):
            fake_api.add_repo("pkg-a")
            with fake_api.client() as client:
                assert [r.name for r in client.repos.list_public("test-org")] == ["pkg-a"]
        ```
    """
    api = FakeGitHubAPI(org="test-org")
    yield api
    api.reset_requests()


@pytest.fixture
def report_config(tmp_path: Path) -> ReportConfig:
    """Provide a ReportConfig writing into the test's temporary directory."""
    return ReportConfig(
        token="test-token",
        org="test-org",
        output_path=tmp_path / "maintainers.csv",
    )


@pytest.fixture
def sample_repository() -> Repository:
    return create_mock_repository(name="pkg-a", org="org")


@pytest.fixture
def sample_maintainer() -> Collaborator:
    return create_mock_collaborator(login="alice", maintain=True)
