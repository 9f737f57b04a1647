"""Repository invitations resource client.

See https://docs.github.com/rest/collaborators/invitations
"""

from typing import TYPE_CHECKING

from hubkit import urls
from hubkit.accept_headers import INVITATIONS_API_PREVIEW
from hubkit.types.invitations import InvitationUpdate, RepositoryInvitation

if TYPE_CHECKING:
    from hubkit.transport import ApiOptions, HTTPTransport

NO_CONTENT = 204
NOT_FOUND = 404


class RepositoryInvitationsClient:
    """Client for repository collaboration invitations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the invitations client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def accept(self, invitation_id: int) -> bool:
        """
        Accept a repository invitation addressed to the current user.

        Args:
            invitation_id: The id of the invitation

        Returns:
            True if the invitation was accepted, False if it was not found

        Raises:
            ApiError: On any other API error
        """
        response = self.transport.send(
            method="PATCH",
            path=urls.user_invitations(invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    def decline(self, invitation_id: int) -> bool:
        """
        Decline a repository invitation addressed to the current user.

        Args:
            invitation_id: The id of the invitation

        Returns:
            True if the invitation was declined, False if it was not found

        Raises:
            ApiError: On any other API error
        """
        response = self.transport.send(
            method="DELETE",
            path=urls.user_invitations(invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            body={},
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    def delete(self, repository_id: int, invitation_id: int) -> bool:
        """
        Delete an invitation on a repository.

        Args:
            repository_id: The id of the repository
            invitation_id: The id of the invitation

        Returns:
            True if the invitation was deleted, False if it was not found

        Raises:
            ApiError: On any other API error
        """
        response = self.transport.send(
            method="DELETE",
            path=urls.repository_invitations(repository_id, invitation_id),
            accept=INVITATIONS_API_PREVIEW,
            body={},
            allow_statuses=(NOT_FOUND,),
        )
        return response.status_code == NO_CONTENT

    def get_all_for_current(
        self, options: "ApiOptions | None" = None
    ) -> list[RepositoryInvitation]:
        """
        List all invitations addressed to the current user.

        Args:
            options: Pagination bounds (optional)

        Returns:
            List of RepositoryInvitation objects

        Raises:
            ApiError: On API errors
        """
        items = self.transport.get_all(
            urls.user_invitations(),
            accept=INVITATIONS_API_PREVIEW,
            options=options,
        )
        return [RepositoryInvitation.from_dict(item) for item in items]

    def get_all_for_repository(
        self, repository_id: int, options: "ApiOptions | None" = None
    ) -> list[RepositoryInvitation]:
        """
        List all invitations on a repository.

        Args:
            repository_id: The id of the repository
            options: Pagination bounds (optional)

        Returns:
            List of RepositoryInvitation objects

        Raises:
            ApiError: On API errors
        """
        items = self.transport.get_all(
            urls.repository_invitations(repository_id),
            accept=INVITATIONS_API_PREVIEW,
            options=options,
        )
        return [RepositoryInvitation.from_dict(item) for item in items]

    def edit(
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
            ApiError: On API errors
        """
        if update is None:
            raise ValueError("update must not be None")

        data = self.transport.patch_json(
            urls.repository_invitations(repository_id, invitation_id),
            body=update.to_dict(),
            accept=INVITATIONS_API_PREVIEW,
        )
        return RepositoryInvitation.from_dict(data)
