"""Async repository invitations resource client."""

from typing import TYPE_CHECKING

from hubkit import urls
from hubkit.accept_headers import INVITATIONS_API_PREVIEW
from hubkit.clients.invitations import NO_CONTENT, NOT_FOUND
from hubkit.types.invitations import InvitationUpdate, RepositoryInvitation

if TYPE_CHECKING:
    from hubkit.async_transport import AsyncHTTPTransport
    from hubkit.transport import ApiOptions


class AsyncRepositoryInvitationsClient:
    """Async client for repository collaboration invitations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async invitations client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def accept(self, invitation_id: int) -> bool:
        """
        Accept a repository invitation.

        Args:
            invitation_id: The id of the invitation

        Returns:
            True if accepted, False if the invitation was not found
        """
        response = await self.transport.send(
            method="PATCH",
            path=urls.user_invitations(invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    async def decline(self, invitation_id: int) -> bool:
        """
        Decline a repository invitation.

        Args:
            invitation_id: The id of the invitation

        Returns:
            True if declined, False if the invitation was not found
        """
        response = await self.transport.send(
            method="DELETE",
            path=urls.user_invitations(invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            body={},
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    async def delete(self, repository_id: int, invitation_id: int) -> bool:
        """
        Delete an invitation on a repository.

        Args:
            repository_id: The id of the repository
            invitation_id: The id of the invitation

        Returns:
            True if deleted, False if the invitation was not found
        """
        response = await self.transport.send(
            method="DELETE",
            path=urls.repository_invitations(repository_id, invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            body={},
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    async def get_all_for_current(
        self, options: "ApiOptions | None" = None
    ) -> list[RepositoryInvitation]:
        """List all invitations addressed to the current user."""
        items = await self.transport.get_all(
            urls.user_invitations(),
            accept=INVITATIONS_API_PREVIEW,
            options=options,
        )
        return [RepositoryInvitation.from_dict(item) for item in items]

    async def get_all_for_repository(
        self, repository_id: int, options: "ApiOptions | None" = None
    ) -> list[RepositoryInvitation]:
        """List all invitations on a repository."""
        items = await self.transport.get_all(
            urls.repository_invitations(repository_id),
            accept=INVITATIONS_API_PREVIEW,
            options=options,
        )
        return [RepositoryInvitation.from_dict(item) for item in items]

    async def edit(
        self,
        repository_id: int,
        invitation_id: int,
        update: InvitationUpdate,
    ) -> RepositoryInvitation:
        """
        Change the permission offered by an invitation.

        Args:
            repository_id: The id of the repository
            invitation_id: The id of the invitation
            update: The new permission for the collaborator

        Returns:
            The updated RepositoryInvitation

        Raises:
            ValueError: If update is None
        """
        if update is None:
            raise ValueError("update must not be None")

        data = await self.transport.patch_json(
            urls.repository_invitations(repository_id, invitation_id),
            body=update.to_dict(),
            accept=INVITATIONS_API_PREVIEW,
        )
        return RepositoryInvitation.from_dict(data)
