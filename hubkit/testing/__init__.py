"""hubkit testing utilities.

Provides mock clients and fixtures for testing applications that use hubkit.
"""

from hubkit.testing.fixtures import create_mock_invitation, create_mock_user
from hubkit.testing.mock import MockCall, MockHubKitClient, MockResponse

__all__ = [
    # Mock client
    "MockHubKitClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_invitation",
    "create_mock_user",
]
