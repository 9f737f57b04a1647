"""Repository invitation data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from hubkit.types.users import User


class InvitationPermission(str, Enum):
    """Permission level offered by an invitation."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    TRIAGE = "triage"
    MAINTAIN = "maintain"


def _parse_permission(value: str) -> InvitationPermission | str:
    try:
        return InvitationPermission(value)
    except ValueError:
        return value


def _parse_timestamp(value: str) -> datetime:
    # GitHub sends "2016-06-13T14:52:50Z"
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class InvitationRepository:
    """The repository an invitation grants access to."""

    id: int
    name: str
    full_name: str
    owner: User
    private: bool = False
    html_url: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InvitationRepository":
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            owner=User.from_dict(data["owner"]),
            private=data.get("private", False),
            html_url=data.get("html_url"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class RepositoryInvitation:
    """A pending offer of collaboration access to a repository."""

    id: int
    repository: InvitationRepository
    invitee: User | None
    inviter: User | None
    permissions: InvitationPermission | str
    created_at: datetime
    url: str | None = None
    html_url: str | None = None
    expired: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepositoryInvitation":
        """
        Build an invitation from an API response object.

        Args:
            data: Decoded JSON object for one invitation

        Returns:
            RepositoryInvitation instance
        """
        invitee = data.get("invitee")
        inviter = data.get("inviter")
        return cls(
            id=data["id"],
            repository=InvitationRepository.from_dict(data["repository"]),
            invitee=User.from_dict(invitee) if invitee else None,
            inviter=User.from_dict(inviter) if inviter else None,
            permissions=_parse_permission(data["permissions"]),
            created_at=_parse_timestamp(data["created_at"]),
            url=data.get("url"),
            html_url=data.get("html_url"),
            expired=data.get("expired", False),
        )


@dataclass
class InvitationUpdate:
    """Request payload for changing the permission of an invitation."""

    permissions: InvitationPermission | str

    def to_dict(self) -> dict[str, str]:
        permissions = self.permissions
        if isinstance(permissions, InvitationPermission):
            permissions = permissions.value
        return {"permissions": permissions}
