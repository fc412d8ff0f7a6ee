"""Error classification for Neople open API responses."""

from df_client.errors.exceptions import (
    AlreadyInitializedError,
    APIError,
    BadRequestError,
    ClientError,
    DfError,
    ForbiddenError,
    InvalidQueryParameter,
    NotFoundError,
    NotInitializedError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
    UnauthorizedError,
)
from df_client.errors.handler import raise_for_status
from df_client.errors.models import ApiErrorBody, ErrorCode

__all__ = [
    "APIError",
    "AlreadyInitializedError",
    "ApiErrorBody",
    "BadRequestError",
    "ClientError",
    "DfError",
    "ErrorCode",
    "ForbiddenError",
    "InvalidQueryParameter",
    "NotFoundError",
    "NotInitializedError",
    "RateLimitError",
    "ResponseDecodeError",
    "ServerError",
    "UnauthorizedError",
    "raise_for_status",
]
