"""
hubkit async client.

Provides the async interface for interacting with the GitHub API.
"""

from typing import Any

import httpx

from hubkit.async_clients import AsyncRepositoryInvitationsClient
from hubkit.async_transport import AsyncHTTPTransport
from hubkit.client import _read_env
from hubkit.transport import RetryConfig


class AsyncHubKitClient:
    """
    Async client for interacting with the GitHub API.

    Aggregates all async resource clients and handles authentication.
    Uses httpx for async HTTP operations.

    Example:
        ```python
        import asyncio
        from hubkit import AsyncHubKitClient

        async def main():
            async with AsyncHubKitClient(token="ghp_...") as client:
                pending = await client.repository_invitations.get_all_for_current()
                for invitation in pending:
                    await client.repository_invitations.decline(invitation.id)

        asyncio.run(main())
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
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async hubkit client.

        Args:
            token: Personal access or installation token (optional)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            http_transport: Custom httpx async transport, mainly for tests (optional)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
            http_transport=http_transport,
        )

        self.repository_invitations = AsyncRepositoryInvitationsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncHubKitClient":
        """
        Create an async client from environment variables.

        Reads GITHUB_TOKEN (required) and GITHUB_API_URL (optional).

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
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncHubKitClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
