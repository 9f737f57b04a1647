"""hubkit - Python SDK for GitHub repository invitations."""

from hubkit._version import __version__
from hubkit.async_client import AsyncHubKitClient
from hubkit.client import HubKitClient
from hubkit.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from hubkit.logging import configure_logging, get_logger
from hubkit.transport import ApiOptions, ApiResponse, HTTPTransport, RetryConfig
from hubkit.types import (
    InvitationPermission,
    InvitationRepository,
    InvitationUpdate,
    RepositoryInvitation,
    User,
)

__all__ = [
    "__version__",
    # Main Clients
    "HubKitClient",
    "AsyncHubKitClient",
    # Types
    "InvitationPermission",
    "InvitationRepository",
    "InvitationUpdate",
    "RepositoryInvitation",
    "User",
    # Exceptions
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    "ApiOptions",
    "ApiResponse",
    # Logging
    "configure_logging",
    "get_logger",
]
