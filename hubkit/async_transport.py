"""
Async HTTP Transport for hubkit.

Handles async HTTP communication with automatic retry logic, pagination
and error handling using the httpx async client.
"""

import asyncio
import time
from collections.abc import Callable, Collection, Coroutine
from typing import Any

import httpx

from hubkit.exceptions import ApiError, ServerError
from hubkit.logging import get_logger, log_http_request, log_http_response
from hubkit.transport import (
    DEFAULT_USER_AGENT,
    ApiOptions,
    ApiResponse,
    BaseTransport,
    RetryConfig,
    parse_error_response,
)

logger = get_logger("http")


class AsyncHTTPTransport(BaseTransport):
    """
    Async HTTP transport layer with authentication, pagination and retry logic.

    Handles:
    - Bearer token authentication and GitHub API version headers
    - Per-request Accept media types (preview headers)
    - Exponential backoff with jitter for retries
    - Link header pagination
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access or installation token (optional)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            user_agent: User-Agent header sent with every request
            http_transport: Custom httpx async transport (e.g. httpx.MockTransport)
        """
        super().__init__(base_url, token, timeout, retry_config, user_agent)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
            transport=http_transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def send(
        self,
        method: str,
        path: str,
        accept: str | None = None,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        allow_statuses: Collection[int] = (),
    ) -> ApiResponse:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method (GET, PATCH, DELETE, etc.)
            path: API path or absolute URL
            accept: Media type for the Accept header (optional)
            body: JSON request body (optional)
            params: Query parameters (optional)
            allow_statuses: Error statuses returned to the caller instead of raised

        Returns:
            ApiResponse with status code, headers and decoded body

        Raises:
            ApiError: On API errors not listed in allow_statuses
        """
        headers = self._request_headers(accept)

        async def make_request() -> httpx.Response:
            log_http_request(method, path, headers, body)
            return await self._client.request(
                method, path, params=params, json=body, headers=headers
            )

        response = await self._execute_with_retry(make_request, path, allow_statuses)
        return self._to_api_response(response)

    async def get_json(
        self,
        path: str,
        accept: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET a single resource and return its decoded body."""
        response = await self.send("GET", path, accept=accept, params=params)
        return response.data

    async def patch_json(
        self,
        path: str,
        body: dict[str, Any],
        accept: str | None = None,
    ) -> Any:
        """PATCH a resource and return the decoded body of the response."""
        response = await self.send("PATCH", path, accept=accept, body=body)
        return response.data

    async def get_all(
        self,
        path: str,
        accept: str | None = None,
        options: ApiOptions | None = None,
    ) -> list[Any]:
        """GET every page of a collection, following Link headers."""
        params: dict[str, Any] | None = options.to_params() if options else None
        page_count = options.page_count if options else None
        items: list[Any] = []
        pages = 0
        url: str | None = path

        while url is not None:
            response = await self.send("GET", url, accept=accept, params=params)
            items.extend(response.data or [])
            pages += 1

            if page_count is not None and pages >= page_count:
                break

            url = response.next_url
            params = None

        return items

    async def _execute_with_retry(
        self,
        request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]],
        path: str,
        allow_statuses: Collection[int] = (),
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Async function that makes the HTTP request
            path: Request path, for logging
            allow_statuses: Error statuses returned instead of raised

        Returns:
            The final HTTP response

        Raises:
            ApiError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = await request_fn()
                elapsed_ms = (time.monotonic() - started) * 1000
                log_http_response(response.status_code, path, elapsed_ms=elapsed_ms)

                if response.status_code < 400 or response.status_code in allow_statuses:
                    return response

                error = parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                logger.info(
                    "Retrying %s after HTTP %d in %.2fs (attempt %d)",
                    path, response.status_code, wait_time, attempt + 1,
                )
                await asyncio.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                logger.info("Retrying %s after %s in %.2fs", path, type(e).__name__, wait_time)
                await asyncio.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, ApiError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
