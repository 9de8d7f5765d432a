"""Maintainer report type definitions.

This module exports all data model types used by the report.
"""

from maintainer_report.types.issues import Issue
from maintainer_report.types.report import ReportRow
from maintainer_report.types.repos import Collaborator, Permissions, Repository

__all__ = [
    # Repository types
    "Repository",
    "Collaborator",
    "Permissions",
    # Issue types
    "Issue",
    # Report types
    "ReportRow",
]
