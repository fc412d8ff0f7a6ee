"""Opt-in retry of rate-limited requests.

The Neople API answers quota overruns (``API002``) with 429. ``DfClient``
surfaces those as ``RateLimitError`` and never retries on its own; callers
that prefer to wait can install ``RateLimitRetry`` as the client transport.

Example:
    ```python
    import httpx

    from df_client import DfClient
    from df_client.transport import RateLimitRetry

    transport = RateLimitRetry(
        wrapped_transport=httpx.AsyncHTTPTransport(),
        max_retries=3,
        max_backoff=30,
    )
    client = DfClient(api_key, transport=transport)
    ```
"""

import asyncio
import logging
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)


class RateLimitRetry(httpx.AsyncBaseTransport):
    """Retry 429 responses, honouring ``Retry-After``.

    Args:
        wrapped_transport: The transport that actually sends requests.
        max_retries: Retries after the first attempt (default: 3).
        backoff_factor: Base of the exponential backoff used when the
            response has no usable ``Retry-After`` (default: 1.0).
        max_backoff: Upper bound on any single wait, in seconds (default: 60).
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        max_backoff: float = 60.0,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff

    async def __aenter__(self):
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retries = 0
        while True:
            response = await self._wrapped_transport.handle_async_request(request)
            if response.status_code != 429 or retries >= self.max_retries:
                return response

            retries += 1
            delay = self._parse_retry_after(response)
            if delay is None:
                delay = self._calculate_backoff_delay(retries)
            # the discarded 429 must release its connection
            await response.aclose()

            logger.warning(
                f"Request {request.method} {request.url} rate limited, "
                f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
            )
            await asyncio.sleep(delay)

    def _parse_retry_after(self, response: httpx.Response) -> float | None:
        """Delay from ``Retry-After`` as seconds or an HTTP date, capped.

        Returns None when the header is missing, malformed or in the past.
        """
        retry_after = response.headers.get("Retry-After")
        if not retry_after:
            return None

        try:
            delay = int(retry_after)
            if delay < 0:
                return None
            return float(min(delay, self.max_backoff))
        except ValueError:
            pass

        try:
            delay = (parsedate_to_datetime(retry_after) - datetime.now(UTC)).total_seconds()
        except (ValueError, TypeError):
            return None
        if delay < 0:
            return None
        return float(min(delay, self.max_backoff))

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        """``backoff_factor * 2 ** (retry_number - 1)``, capped at ``max_backoff``."""
        return min(self.backoff_factor * (2 ** (retry_number - 1)), self.max_backoff)
