"""GitHub resource clients."""

from maintainer_report.clients.collaborators import CollaboratorsClient
from maintainer_report.clients.issues import IssuesClient
from maintainer_report.clients.repos import ReposClient

__all__ = [
    "ReposClient",
    "CollaboratorsClient",
    "IssuesClient",
]
