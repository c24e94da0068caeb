"""Custom exceptions for datastore clients."""


class ClientError(Exception):
    """Base exception for all datastore client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when the datastore cannot be reached."""

    pass


class APIError(ClientError):
    """Raised when the datastore returns a non-2xx response.

    Attributes:
        status_code: HTTP status of the response
        errors: Error messages reported in the response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[str] | None = None,
        *args,
        **kwargs,
    ):
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class AuthenticationError(APIError):
    """Raised when the datastore rejects the credentials (401/403)."""

    def __init__(self, message: str = "Not authorized", status_code: int = 401):
        super().__init__(message, status_code=status_code)


class RateLimitError(APIError):
    """Raised when the datastore returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when a collection or document does not exist (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(ClientError):
    """Raised when a document is rejected or a response has an unexpected shape."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
