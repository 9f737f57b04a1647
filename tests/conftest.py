"""Shared fixtures for the hubkit test suite."""

from hubkit.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_invitations,
    mock_invitation_id,
    mock_repository_id,
    sample_invitation,
    sample_user,
)
