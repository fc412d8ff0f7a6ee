"""Testing utilities for code built on ``DfClient``.

Mock response factories and a recording handler for ``httpx.MockTransport``,
so tests never touch the network.

Example:
    ```python
    from df_client.testing import RecordingHandler, make_client, rows_response


    async def test_search():
        handler = RecordingHandler(lambda request: rows_response([...]))
        async with make_client(handler) as client:
            await client.item().name("포션").search()
        assert handler.requests[0].url.path == "/df/items"
    ```
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from df_client.client import DfClient


def rows_response(rows: list[dict[str, Any]], status_code: int = 200) -> httpx.Response:
    """A list endpoint response: ``{"rows": [...]}``."""
    return httpx.Response(status_code, json={"rows": rows})


def object_response(data: dict[str, Any], status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=data)


def error_response(
    status_code: int,
    code: str,
    message: str = "error",
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """An error response in the API's ``{"error": {...}}`` shape."""
    return httpx.Response(
        status_code,
        json={"error": {"status": status_code, "code": code, "message": message}},
        headers=headers,
    )


class RecordingHandler:
    """Mock transport handler that records every request it answers.

    Args:
        responder: Builds the response for a request.
    """

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        self.requests.append(request)
        return self.responder(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_query(self) -> str:
        """Raw query string of the most recent request."""
        return self.requests[-1].url.query.decode("ascii")


def make_client(handler: RecordingHandler, api_key: str = "test-key", **kwargs) -> DfClient:
    return DfClient(api_key, transport=handler.transport(), **kwargs)


__all__ = [
    "RecordingHandler",
    "error_response",
    "make_client",
    "object_response",
    "rows_response",
]
