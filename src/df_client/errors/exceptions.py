"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from df_client.errors.models import ApiErrorBody, ErrorCode


class DfError(Exception):
    """Base exception for everything raised by this library."""

    pass


class APIError(DfError):
    """Base exception for classified API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error: "ApiErrorBody | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error = error

    @property
    def code(self) -> "ErrorCode | None":
        return self.error.code if self.error else None

    @property
    def description(self) -> str | None:
        return self.error.code.description if self.error else None

    @property
    def api_message(self) -> str | None:
        return self.error.message if self.error else None


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests (API key quota exceeded)."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class ResponseDecodeError(DfError):
    """Raised when a response body does not have the expected shape.

    This covers error bodies carrying an error code outside the known set:
    those are deliberately not turned into an ``APIError``.
    """

    def __init__(self, message: str, response: "httpx.Response | None" = None):
        super().__init__(message)
        self.response = response


class InvalidQueryParameter(DfError):
    """Raised before any request is sent when search parameters are unusable.

    Attributes:
        path: The request path (or URL) the parameters were meant for.
        message: Human-readable description of what is missing or invalid.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class AlreadyInitializedError(DfError):
    """Raised when the shared client is initialised twice."""

    pass


class NotInitializedError(DfError):
    """Raised when the shared client is requested before initialisation."""

    pass
