#!/usr/bin/env python3
"""
Basic maintainer report usage example.

Runs the report against an in-memory fake of the GitHub API, then shows how
the same pieces are used against the real API.
Run with: python examples/basic_usage.py
"""

import tempfile
from pathlib import Path

from maintainer_report import ConfigurationError, MaintainerReportError, ReportConfig, run_report
from maintainer_report.testing import FakeGitHubAPI

print("=== Maintainer Report Basic Usage Example ===\n")

# 1. Exception hierarchy
print("1. Testing exception classes...")
try:
    raise ConfigurationError("GITHUB_TOKEN is not set")
except MaintainerReportError as e:
    print(f"   Caught MaintainerReportError: {e}")
    print(f"   Code: {e.code}, Message: {e.message}")

print("\n   OK: Exception classes working\n")

# 2. Report against a fake organization
print("2. Running a report against a fake organization...")
api = FakeGitHubAPI(org="example-org")
api.add_repo(".github")
api.add_repo("pkg-a")
api.add_repo("pkg-b")
api.add_collaborator("pkg-a", "alice", maintain=True)
api.add_collaborator("pkg-a", "bob", maintain=False)
api.add_issue("pkg-a")
api.add_issue("pkg-a", pull_request=True)
api.fail("/repos/example-org/pkg-b/collaborators", 404)

with tempfile.TemporaryDirectory() as tmp:
    config = ReportConfig(token="not-a-real-token", org="example-org", output_path=Path(tmp) / "maintainers.csv")
    with api.client() as client:
        rows = run_report(client, config)
    print(config.output_path.read_text(encoding="utf-8"))

assert [row.repo_name for row in rows] == ["pkg-a", "pkg-b"], "'.github' should be excluded"
print(f"   Requests made: {len(api.requests)}")

print("\n   OK: Report working\n")

# 3. Against the real API:
#
#     from maintainer_report import GitHubClient
#
#     config = ReportConfig.from_env(org="my-org")   # reads GITHUB_TOKEN
#     with GitHubClient.from_config(config) as client:
#         run_report(client, config)
