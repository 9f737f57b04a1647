"""
hubkit main client.

Provides the primary interface for interacting with the GitHub API.
"""

import os
from typing import Any

import httpx

from hubkit.clients import RepositoryInvitationsClient
from hubkit.exceptions import ConfigurationError
from hubkit.transport import HTTPTransport, RetryConfig


class HubKitClient:
    """
    Main client for interacting with the GitHub API.

    Aggregates all resource clients and handles authentication.

    Example:
        ```python
        from hubkit import HubKitClient

        # Create client with explicit configuration
        client = HubKitClient(token="ghp_...")

        # Or create from environment variables
        client = HubKitClient.from_env()

        for invitation in client.repository_invitations.get_all_for_current():
            client.repository_invitations.accept(invitation.id)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the hubkit client.

        Args:
            token: Personal access or installation token (optional)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            http_transport: Custom httpx transport, mainly for tests (optional)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )

        # Initialize resource clients
        self.repository_invitations = RepositoryInvitationsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "HubKitClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Token used for authentication (required)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Args:
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)

        Returns:
            Configured HubKitClient instance

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        token, base_url = _read_env(cls.DEFAULT_BASE_URL)
        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "HubKitClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _read_env(default_base_url: str) -> tuple[str, str]:
    token = os.environ.get("GITHUB_TOKEN")
    base_url = os.environ.get("GITHUB_API_URL") or default_base_url

    if not token:
        raise ConfigurationError("GITHUB_TOKEN environment variable not set")

    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"Invalid GITHUB_API_URL: {base_url}. Must start with http:// or https://"
        )

    return token, base_url
