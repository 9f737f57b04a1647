"""User-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """A GitHub account as embedded in other resources."""

    id: int
    login: str
    html_url: str | None = None
    type: str = "User"  # "User", "Organization" or "Bot"
    site_admin: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            login=data["login"],
            html_url=data.get("html_url"),
            type=data.get("type", "User"),
            site_admin=data.get("site_admin", False),
        )
