"""
Tests for hubkit testing utilities.

Verifies that MockHubKitClient and fixtures work correctly.
"""

from datetime import timezone

import pytest

from hubkit.exceptions import NotFoundError, ServerError
from hubkit.testing import MockHubKitClient, create_mock_invitation, create_mock_user
from hubkit.types.invitations import (
    InvitationPermission,
    InvitationUpdate,
    RepositoryInvitation,
)


class TestMockHubKitClient:
    """Tests for MockHubKitClient."""

    def test_default_responses(self) -> None:
        """Test that mock client returns sensible defaults."""
        mock = MockHubKitClient(login="test-user")
        invitations = mock.repository_invitations

        assert invitations.accept(42) is True
        assert invitations.decline(42) is True
        assert invitations.delete(7, 42) is True
        assert invitations.get_all_for_current() == []
        assert invitations.get_all_for_repository(7) == []

        edited = invitations.edit(7, 42, InvitationUpdate(permissions=InvitationPermission.ADMIN))
        assert edited.id == 42
        assert edited.repository.id == 7
        assert edited.repository.full_name == "test-user/mock-repo"
        assert edited.permissions is InvitationPermission.ADMIN
        assert edited.created_at.tzinfo is timezone.utc

    def test_configured_responses(self) -> None:
        """Test that configured responses are returned, including False."""
        mock = MockHubKitClient()
        invitation = create_mock_invitation(id=99)

        mock.repository_invitations.configure_decline(response=False)
        mock.repository_invitations.configure_get_all_for_current(response=[invitation])

        assert mock.repository_invitations.decline(99) is False
        assert mock.repository_invitations.get_all_for_current() == [invitation]

    def test_configured_errors(self) -> None:
        """Test that configured errors are raised."""
        mock = MockHubKitClient()

        mock.repository_invitations.configure_get_all_for_repository(
            error=NotFoundError("NOT_FOUND", "Not Found", status_code=404)
        )
        mock.repository_invitations.configure_accept(
            error=ServerError("INTERNAL_SERVER_ERROR", "Boom", status_code=500)
        )

        with pytest.raises(NotFoundError) as exc_info:
            mock.repository_invitations.get_all_for_repository(7)
        assert exc_info.value.code == "NOT_FOUND"

        with pytest.raises(ServerError):
            mock.repository_invitations.accept(42)

    def test_edit_without_update_is_rejected_and_not_recorded(self) -> None:
        mock = MockHubKitClient()

        with pytest.raises(ValueError):
            mock.repository_invitations.edit(7, 42, None)  # type: ignore[arg-type]

        assert not mock.was_called("repository_invitations.edit")

    def test_call_tracking(self) -> None:
        """Test that method calls are tracked."""
        mock = MockHubKitClient()

        mock.repository_invitations.accept(1)
        mock.repository_invitations.accept(2)
        mock.repository_invitations.delete(7, 3)

        assert mock.was_called("repository_invitations.accept")
        assert mock.call_count("repository_invitations.accept") == 2
        assert mock.call_count("repository_invitations.delete") == 1
        assert not mock.was_called("repository_invitations.decline")

    def test_get_calls(self) -> None:
        """Test that call details can be retrieved."""
        mock = MockHubKitClient()

        mock.repository_invitations.delete(7, 42)

        calls = mock.get_calls("repository_invitations.delete")
        assert len(calls) == 1
        assert calls[0].args == (7, 42)
        assert calls[0].timestamp.tzinfo is timezone.utc
        assert len(mock.get_calls()) == 1

    def test_reset(self) -> None:
        """Test that reset clears calls and responses."""
        mock = MockHubKitClient()

        mock.repository_invitations.configure_accept(response=False)
        assert mock.repository_invitations.accept(1) is False

        mock.reset()

        assert not mock.was_called("repository_invitations.accept")
        assert mock.repository_invitations.accept(1) is True

    def test_context_manager(self) -> None:
        """Test that mock client works as context manager."""
        with MockHubKitClient() as mock:
            assert mock.repository_invitations.accept(1) is True


class TestFixtures:
    """Tests for the pytest fixtures."""

    def test_mock_client_fixture(self, mock_client: MockHubKitClient) -> None:
        assert mock_client.login == "test-user"
        assert mock_client.repository_invitations.accept(1) is True

    def test_mock_client_with_invitations(
        self,
        mock_client_with_invitations: MockHubKitClient,
        sample_invitation: RepositoryInvitation,
        mock_repository_id: int,
    ) -> None:
        invitations = mock_client_with_invitations.repository_invitations

        assert invitations.get_all_for_current() == [sample_invitation]
        assert invitations.get_all_for_repository(mock_repository_id) == [sample_invitation]


class TestHelperFunctions:
    """Tests for helper functions."""

    def test_create_mock_invitation(self) -> None:
        invitation = create_mock_invitation(id=5, repository_id=9, permissions="read", expired=True)

        assert invitation.id == 5
        assert invitation.repository.id == 9
        assert invitation.permissions == "read"
        assert invitation.expired is True
        assert invitation.inviter is not None
        assert invitation.inviter.login == "octocat"  # Default

    def test_create_mock_user(self) -> None:
        user = create_mock_user(id=3, login="hubber", site_admin=True)

        assert user.id == 3
        assert user.login == "hubber"
        assert user.html_url == "https://github.com/hubber"
        assert user.site_admin is True
