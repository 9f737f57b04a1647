"""hubkit exception classes."""



class ApiError(Exception):
    """Base exception for all errors reported by the GitHub API."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
        documentation_url: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        self.status_code = status_code
        self.documentation_url = documentation_url
        super().__init__(f"[{code}] {message}")


class ConfigurationError(ApiError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(ApiError):
    """Raised when the token is missing or rejected (401)."""

    pass


class AuthorizationError(ApiError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(ApiError):
    """Raised when a resource is not found."""

    pass


class ConflictError(ApiError):
    """Raised on conflicts (409)."""

    pass


class RateLimitedError(ApiError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
        status_code: int | None = None,
        documentation_url: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id, status_code, documentation_url)
        self.retry_after = retry_after


class ValidationError(ApiError):
    """Raised on validation errors (422 and other 4xx)."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
        documentation_url: str | None = None,
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(code, message, request_id, status_code, documentation_url)
        self.errors = errors or []


class ServerError(ApiError):
    """Raised on server errors (5xx)."""

    pass
