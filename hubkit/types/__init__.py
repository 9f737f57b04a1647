"""hubkit type definitions.

This module exports all data model types used by the SDK.
"""

from hubkit.types.invitations import (
    InvitationPermission,
    InvitationRepository,
    InvitationUpdate,
    RepositoryInvitation,
)
from hubkit.types.users import User

__all__ = [
    # User types
    "User",
    # Invitation types
    "InvitationPermission",
    "InvitationRepository",
    "InvitationUpdate",
    "RepositoryInvitation",
]
