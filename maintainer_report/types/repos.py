"""Repository and collaborator data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Repository:
    """Public repository of an organization."""

    name: str
    html_url: str
    archived: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            name=data["name"],
            html_url=data.get("html_url", ""),
            archived=bool(data.get("archived", False)),
        )


@dataclass
class Permissions:
    """Collaborator permission flags. Any flag may be missing from the payload."""

    admin: bool | None = None
    maintain: bool | None = None
    push: bool | None = None
    pull: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Permissions":
        return cls(
            admin=data.get("admin"),
            maintain=data.get("maintain"),
            push=data.get("push"),
            pull=data.get("pull"),
        )


@dataclass
class Collaborator:
    """Outside collaborator of a repository."""

    login: str
    permissions: Permissions | None = None

    @property
    def is_maintainer(self) -> bool:
        """True only when the maintain permission is explicitly granted."""
        return self.permissions is not None and self.permissions.maintain is True

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Collaborator":
        permissions = data.get("permissions")
        return cls(
            login=data["login"],
            permissions=Permissions.from_api(permissions) if permissions is not None else None,
        )
