"""Maintainer report testing utilities.

Provides a fake GitHub API and factories for testing code that uses the report.
"""

from maintainer_report.testing.fake_api import FakeGitHubAPI, RecordedRequest
from maintainer_report.testing.fixtures import (
    create_mock_collaborator,
    create_mock_issue,
    create_mock_repository,
)

__all__ = [
    # Fake API
    "FakeGitHubAPI",
    "RecordedRequest",
    # Helper functions
    "create_mock_repository",
    "create_mock_collaborator",
    "create_mock_issue",
]
