"""
HTTP Transport for hubkit.

Handles HTTP communication with the GitHub API: authentication headers,
automatic retry logic, pagination and error handling.
"""

import random
import time
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from hubkit._version import __version__
from hubkit.accept_headers import DEFAULT_MEDIA_TYPE
from hubkit.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from hubkit.logging import get_logger, log_http_request, log_http_response, redact_token

logger = get_logger("http")

API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = f"hubkit-python/{__version__}"


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


@dataclass
class ApiOptions:
    """Bounds for paginated listing requests."""

    page_size: int | None = None
    page_count: int | None = None
    start_page: int | None = None

    def __post_init__(self) -> None:
        for name in ("page_size", "page_count", "start_page"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be a positive integer")

    def to_params(self) -> dict[str, int]:
        """Query parameters for the first page."""
        params: dict[str, int] = {}
        if self.page_size is not None:
            params["per_page"] = self.page_size
        if self.start_page is not None:
            params["page"] = self.start_page
        return params


@dataclass
class ApiResponse:
    """Status, headers and decoded body of a completed request."""

    status_code: int
    headers: Mapping[str, str]
    data: Any = None
    next_url: str | None = None


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        # Plain-text or HTML bodies, e.g. a proxy's 404 page
        return None


def _error_code(status_code: int) -> str:
    try:
        return httpx.codes(status_code).name
    except ValueError:
        return f"HTTP_{status_code}"


def _rate_limit_wait(headers: Mapping[str, str]) -> int:
    retry_after = headers.get("Retry-After")
    if retry_after:
        try:
            return int(retry_after)
        except ValueError:
            pass

    reset = headers.get("X-RateLimit-Reset")
    if reset:
        try:
            return max(int(reset) - int(time.time()), 0)
        except ValueError:
            pass

    return 60


def parse_error_response(response: httpx.Response) -> ApiError:
    """
    Parse an error response into a typed exception.

    GitHub error bodies look like
    {"message": "Not Found", "documentation_url": "...", "errors": [...]}.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate ApiError subclass
    """
    try:
        data = response.json()
    except Exception:
        data = {}
    if not isinstance(data, dict):
        data = {}

    status_code = response.status_code
    code = _error_code(status_code)
    message = data.get("message", f"HTTP {status_code}")
    documentation_url = data.get("documentation_url")
    request_id = response.headers.get("X-GitHub-Request-Id")

    extra = {
        "request_id": request_id,
        "status_code": status_code,
        "documentation_url": documentation_url,
    }

    if status_code == 401:
        return AuthenticationError(code, message, **extra)
    elif status_code == 403:
        if response.headers.get("X-RateLimit-Remaining") == "0":
            return RateLimitedError(
                code, message, _rate_limit_wait(response.headers), **extra
            )
        return AuthorizationError(code, message, **extra)
    elif status_code == 404:
        return NotFoundError(code, message, **extra)
    elif status_code == 409:
        return ConflictError(code, message, **extra)
    elif status_code == 429:
        return RateLimitedError(
            code, message, _rate_limit_wait(response.headers), **extra
        )
    elif status_code >= 500:
        return ServerError(code, message, **extra)
    else:
        return ValidationError(code, message, errors=data.get("errors"), **extra)


class BaseTransport:
    """Configuration and retry policy shared by the sync and async transports."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize transport configuration.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access or installation token (optional)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            user_agent: User-Agent header sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self.user_agent = user_agent
        logger.debug(
            "Transport configured for %s (token=%s)",
            self.base_url,
            redact_token(token) if token else None,
        )

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Accept": DEFAULT_MEDIA_TYPE,
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    @staticmethod
    def _request_headers(accept: str | None) -> dict[str, str]:
        return {"Accept": accept} if accept else {}

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _to_api_response(self, response: httpx.Response) -> ApiResponse:
        next_link = response.links.get("next") or {}
        return ApiResponse(
            status_code=response.status_code,
            headers=response.headers,
            data=_decode_body(response),
            next_url=next_link.get("url"),
        )


class HTTPTransport(BaseTransport):
    """
    HTTP transport layer with authentication, pagination and retry logic.

    Handles:
    - Bearer token authentication and GitHub API version headers
    - Per-request Accept media types (preview headers)
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
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
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access or installation token (optional)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            user_agent: User-Agent header sent with every request
            http_transport: Custom httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(base_url, token, timeout, retry_config, user_agent)

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(
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
            path: API path (e.g., "/user/repository_invitations") or absolute URL
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

        def make_request() -> httpx.Response:
            log_http_request(method, path, headers, body)
            return self._client.request(
                method, path, params=params, json=body, headers=headers
            )

        response = self._execute_with_retry(make_request, path, allow_statuses)
        return self._to_api_response(response)

    def get_json(
        self,
        path: str,
        accept: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET a single resource and return its decoded body."""
        return self.send("GET", path, accept=accept, params=params).data

    def patch_json(
        self,
        path: str,
        body: dict[str, Any],
        accept: str | None = None,
    ) -> Any:
        """PATCH a resource and return the decoded body of the response."""
        return self.send("PATCH", path, accept=accept, body=body).data

    def get_all(
        self,
        path: str,
        accept: str | None = None,
        options: ApiOptions | None = None,
    ) -> list[Any]:
        """
        GET every page of a collection, following Link headers.

        Args:
            path: API path of the collection
            accept: Media type for the Accept header (optional)
            options: Page size, page count and start page bounds (optional)

        Returns:
            All items across pages, in server order
        """
        params: dict[str, Any] | None = options.to_params() if options else None
        page_count = options.page_count if options else None
        items: list[Any] = []
        pages = 0
        url: str | None = path

        while url is not None:
            response = self.send("GET", url, accept=accept, params=params)
            items.extend(response.data or [])
            pages += 1

            if page_count is not None and pages >= page_count:
                break

            # Next links already carry the query string
            url = response.next_url
            params = None

        return items

    def _execute_with_retry(
        self,
        request_fn: Callable[[], httpx.Response],
        path: str,
        allow_statuses: Collection[int] = (),
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request
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
                response = request_fn()
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
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                logger.info("Retrying %s after %s in %.2fs", path, type(e).__name__, wait_time)
                time.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, ApiError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
