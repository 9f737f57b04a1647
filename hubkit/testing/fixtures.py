"""
Pytest fixtures for hubkit testing.

Provides common fixtures for testing applications that use hubkit.
"""

from datetime import datetime, timezone
from typing import Any, Generator

import pytest

from hubkit.testing.mock import MockHubKitClient
from hubkit.types.invitations import (
    InvitationPermission,
    InvitationRepository,
    RepositoryInvitation,
)
from hubkit.types.users import User


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockHubKitClient, None, None]:
    """
    Provide a MockHubKitClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repository_invitations.configure_accept(response=False)
            result = my_function(mock_client)
            assert mock_client.was_called("repository_invitations.accept")
        ```
    """
    client = MockHubKitClient(login="test-user")
    yield client
    client.reset()


@pytest.fixture
def mock_repository_id() -> int:
    """Provide a test repository ID."""
    return 7


@pytest.fixture
def mock_invitation_id() -> int:
    """Provide a test invitation ID."""
    return 42


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_user() -> User:
    """Provide a sample User."""
    return create_mock_user()


@pytest.fixture
def sample_invitation() -> RepositoryInvitation:
    """Provide a sample RepositoryInvitation with write permission."""
    return create_mock_invitation()


@pytest.fixture
def mock_client_with_invitations(
    mock_client: MockHubKitClient,
    sample_invitation: RepositoryInvitation,
) -> MockHubKitClient:
    """
    Provide a MockHubKitClient that lists one pending invitation.

    Example:
        ```python
        def test_accept_all(mock_client_with_invitations):
            accept_all(mock_client_with_invitations)
            assert mock_client_with_invitations.call_count(
                "repository_invitations.accept"
            ) == 1
        ```
    """
    invitations = mock_client.repository_invitations
    invitations.configure_get_all_for_current(response=[sample_invitation])
    invitations.configure_get_all_for_repository(response=[sample_invitation])
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_user(
    id: int = 1,
    login: str = "test-user",
    **kwargs: Any,
) -> User:
    """
    Create a User with customizable fields.

    Args:
        id: User ID
        login: User login
        **kwargs: Additional fields to override

    Returns:
        User object
    """
    defaults = {
        "html_url": f"https://github.com/{login}",
        "type": "User",
        "site_admin": False,
    }
    defaults.update(kwargs)
    return User(id=id, login=login, **defaults)


def create_mock_invitation(
    id: int = 42,
    repository_id: int = 7,
    permissions: InvitationPermission | str = InvitationPermission.WRITE,
    **kwargs: Any,
) -> RepositoryInvitation:
    """
    Create a RepositoryInvitation with customizable fields.

    Args:
        id: Invitation ID
        repository_id: ID of the repository the invitation is for
        permissions: Offered permission
        **kwargs: Additional fields to override

    Returns:
        RepositoryInvitation object
    """
    owner = create_mock_user(id=1, login="octocat")
    defaults = {
        "repository": InvitationRepository(
            id=repository_id,
            name="hello-world",
            full_name="octocat/hello-world",
            owner=owner,
            html_url="https://github.com/octocat/hello-world",
        ),
        "invitee": create_mock_user(id=2, login="invitee"),
        "inviter": owner,
        "created_at": datetime(2016, 6, 13, 14, 52, 50, tzinfo=timezone.utc),
        "url": f"https://api.github.com/user/repository_invitations/{id}",
        "html_url": "https://github.com/octocat/hello-world/invitations",
        "expired": False,
    }
    defaults.update(kwargs)
    return RepositoryInvitation(id=id, permissions=permissions, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "mock_repository_id",
    "mock_invitation_id",
    "sample_user",
    "sample_invitation",
    "mock_client_with_invitations",
    # Helper functions
    "create_mock_user",
    "create_mock_invitation",
]
