"""Error envelope models for the Neople open API."""

from dataclasses import dataclass
from enum import Enum

import httpx

from df_client.errors.exceptions import ResponseDecodeError


class ErrorCode(Enum):
    """Closed set of error codes returned in the ``error.code`` field."""

    API000 = "API000"
    API001 = "API001"
    API002 = "API002"
    API003 = "API003"
    API004 = "API004"
    API005 = "API005"
    API006 = "API006"
    API007 = "API007"
    API900 = "API900"
    API901 = "API901"
    API999 = "API999"
    DNF000 = "DNF000"
    DNF001 = "DNF001"
    DNF003 = "DNF003"
    DNF004 = "DNF004"
    DNF005 = "DNF005"
    DNF006 = "DNF006"
    DNF007 = "DNF007"
    DNF008 = "DNF008"
    DNF009 = "DNF009"
    DNF900 = "DNF900"
    DNF901 = "DNF901"
    DNF980 = "DNF980"
    DNF999 = "DNF999"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.API000: "API key missing",
    ErrorCode.API001: "Invalid game id",
    ErrorCode.API002: "API key quota exceeded",
    ErrorCode.API003: "Invalid API key",
    ErrorCode.API004: "Blocked API key",
    ErrorCode.API005: "API key not issued for this game",
    ErrorCode.API006: "Invalid HTTP header",
    ErrorCode.API007: "Client socket communication error",
    ErrorCode.API900: "Invalid URL",
    ErrorCode.API901: "Invalid request parameter",
    ErrorCode.API999: "System error",
    ErrorCode.DNF000: "Invalid server id",
    ErrorCode.DNF001: "Invalid character",
    ErrorCode.DNF003: "Invalid item",
    ErrorCode.DNF004: "Invalid auction or avatar market item",
    ErrorCode.DNF005: "Invalid skill",
    ErrorCode.DNF006: "Invalid timeline time parameter",
    ErrorCode.DNF007: "Auction search count limit exceeded",
    ErrorCode.DNF008: "Multiple item search count limit exceeded",
    ErrorCode.DNF009: "Avatar market title search count limit exceeded",
    ErrorCode.DNF900: "Invalid URL",
    ErrorCode.DNF901: "Invalid request parameter",
    ErrorCode.DNF980: "System under maintenance",
    ErrorCode.DNF999: "System error",
}


@dataclass(frozen=True)
class ApiErrorBody:
    """The ``error`` object of a non-2xx response.

    Wire format: ``{"error": {"status": 404, "code": "DNF001", "message": "..."}}``
    """

    status: int
    code: ErrorCode
    message: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiErrorBody":
        """Parse the error envelope from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ApiErrorBody for the response

        Raises:
            ResponseDecodeError: If the body is not JSON, lacks the envelope
                keys, or carries an unknown error code.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"HTTP {response.status_code}: error body is not JSON", response=response
            ) from e

        try:
            inner = data["error"]
            status = int(inner["status"])
            raw_code = inner["code"]
            message = inner["message"]
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseDecodeError(
                f"HTTP {response.status_code}: malformed error body: {response.text[:200]}",
                response=response,
            ) from e

        try:
            code = ErrorCode(raw_code)
        except ValueError as e:
            raise ResponseDecodeError(
                f"HTTP {response.status_code}: unknown error code {raw_code!r}", response=response
            ) from e

        return cls(status=status, code=code, message=message)

    def to_exception_message(self) -> str:
        return f"{self.code.value} ({self.code.description}): {self.message}"
