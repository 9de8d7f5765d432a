"""Issue data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Issue:
    """Open issue of a repository.

    The issues endpoint also returns pull requests; those carry a non-null
    ``pull_request`` object.
    """

    url: str
    user_login: str
    pull_request: dict[str, Any] | None = None

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Issue":
        user = data.get("user") or {}
        return cls(
            url=data.get("url", ""),
            user_login=user.get("login", ""),
            pull_request=data.get("pull_request"),
        )
