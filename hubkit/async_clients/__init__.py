"""hubkit async resource clients."""

from hubkit.async_clients.invitations import AsyncRepositoryInvitationsClient

__all__ = [
    "AsyncRepositoryInvitationsClient",
]
