"""Async client for the Neople Dungeon&Fighter open API.

Typed access to character, item, auction and image lookups:
- Deterministic query encoding (flat pairs, nested ``q``/``sort`` values,
  ``%20``-encoded identifying names)
- One request pipeline with the API key header and error classification
- Typed exceptions for every documented API error code

Example:
    ```python
    from df_client import DfClient, SortOrder

    async with DfClient.from_env() as client:
        rows = await (
            client.auction()
            .item_name("무색 큐브 조각")
            .sort_by_unit_price(SortOrder.ASC)
            .limit(10)
            .search()
        )
    ```
"""

from df_client.client import DfClient, initialise, instance
from df_client.errors import (
    APIError,
    DfError,
    ErrorCode,
    InvalidQueryParameter,
    RateLimitError,
    ResponseDecodeError,
)
from df_client.models import ItemRarity, Server
from df_client.query import SortOrder, WordType

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "DfClient",
    "DfError",
    "ErrorCode",
    "InvalidQueryParameter",
    "ItemRarity",
    "RateLimitError",
    "ResponseDecodeError",
    "Server",
    "SortOrder",
    "WordType",
    "__version__",
    "initialise",
    "instance",
]
