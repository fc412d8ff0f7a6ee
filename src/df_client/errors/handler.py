"""Turn non-2xx responses into typed exceptions."""

import logging

import httpx

from df_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from df_client.errors.models import ApiErrorBody

logger = logging.getLogger(__name__)

STATUS_EXCEPTIONS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def exception_class(status_code: int) -> type[APIError]:
    """The exception class for an HTTP status code."""
    if status_code in STATUS_EXCEPTIONS:
        return STATUS_EXCEPTIONS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def _retry_after(response: httpx.Response) -> int | None:
    try:
        return int(response.headers["retry-after"])
    except (KeyError, ValueError):
        return None


def raise_for_status(response: httpx.Response) -> None:
    """Raise the classified exception for a non-2xx response.

    The body must be the API's ``{"error": {...}}`` envelope; its parsed
    form is attached to the exception as ``error``.

    Raises:
        APIError: A subclass chosen by status code.
        ResponseDecodeError: If the error body cannot be classified.
    """
    if response.is_success:
        return

    error = ApiErrorBody.from_response(response)
    exc_class = exception_class(response.status_code)
    logger.debug(f"HTTP {response.status_code} {error.code.value}: {error.message}")

    kwargs = {"status_code": response.status_code, "response": response, "error": error}
    if exc_class is RateLimitError:
        kwargs["retry_after"] = _retry_after(response)
    raise exc_class(error.to_exception_message(), **kwargs)
