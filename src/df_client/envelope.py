"""Response envelope decoding.

List endpoints wrap their records as ``{"rows": [...]}``; detail endpoints
return the record itself. Each handler picks the decoder for its endpoint;
nothing here inspects a payload to guess which shape it is.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

import httpx

from df_client.errors import ResponseDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def unwrap_rows(response: httpx.Response, factory: Callable[[dict], T]) -> list[T]:
    """Decode a ``{"rows": [...]}`` body into a list of records.

    Raises:
        ResponseDecodeError: If the body is not the rows envelope or a record
            does not have the expected shape.
    """
    try:
        rows = response.json()["rows"]
        records = [factory(row) for row in rows]
    except _DECODE_ERRORS as e:
        raise ResponseDecodeError(f"Unexpected rows payload: {e!r}", response=response) from e
    logger.debug(f"Decoded {len(records)} rows")
    return records


def unwrap_object(response: httpx.Response, factory: Callable[[dict], T]) -> T:
    """Decode a bare JSON object body into one record.

    Raises:
        ResponseDecodeError: If the record does not have the expected shape.
    """
    try:
        return factory(response.json())
    except _DECODE_ERRORS as e:
        raise ResponseDecodeError(f"Unexpected payload: {e!r}", response=response) from e
