"""
Pytest plugin for maintainer report testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["maintainer_report.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from maintainer_report.testing.fixtures import (
    fake_api,
    report_config,
    sample_maintainer,
    sample_repository,
)

__all__ = [
    "fake_api",
    "report_config",
    "sample_repository",
    "sample_maintainer",
]
