"""
Pytest plugin for hubkit testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
loaded as a pytest plugin by projects that depend on hubkit.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["hubkit.testing.conftest"]

Or import the fixtures directly:

    from hubkit.testing.fixtures import mock_client, sample_invitation
"""

# Re-export all fixtures for pytest auto-discovery
from hubkit.testing.fixtures import (
    mock_client,
    mock_client_with_invitations,
    mock_invitation_id,
    mock_repository_id,
    sample_invitation,
    sample_user,
)

__all__ = [
    "mock_client",
    "mock_repository_id",
    "mock_invitation_id",
    "sample_user",
    "sample_invitation",
    "mock_client_with_invitations",
]
