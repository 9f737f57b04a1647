"""hubkit resource clients."""

from hubkit.clients.invitations import RepositoryInvitationsClient

__all__ = [
    "RepositoryInvitationsClient",
]
