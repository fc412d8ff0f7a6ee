"""Query-string encoding for the Neople open API.

The API mixes three encodings inside one query string:

- plain ``key=value`` pairs for scalar search options (``limit=10``)
- nested values packed under a single key as comma-joined ``name:value``
  pairs (``q=minLevel:50,rarity:에픽``, ``sort=unitPrice:asc``)
- identifying strings (``itemName``, ``itemId``, ``characterName``) that the
  API only accepts with spaces as ``%20``, never ``+``

Parameter objects are dataclasses. Each declares the order its fields are
emitted in with an explicit ``FIELDS`` tuple, so the output does not depend
on the order setters were called in.

Example:
    ```python
    from df_client.query import AuctionQuery, AuctionSearchParameter, compose_query

    param = AuctionSearchParameter(limit=10, query=AuctionQuery(min_level=100))
    compose_query([("itemName", "무색 큐브 조각")], param)
    # 'itemName=%EB%AC%B4%EC%83%89%20...&limit=10&q=minLevel%3A100'
    ```
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import quote, urlencode

from df_client.errors import InvalidQueryParameter
from df_client.models.common import ItemRarity, Server

logger = logging.getLogger(__name__)


class WordType(Enum):
    """Name matching mode for searches."""

    MATCH = "match"
    FRONT = "front"
    FULL = "full"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to the API's lowerCamelCase."""
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def format_value(value: Any) -> str:
    """Render a parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


def percent_encode(value: str) -> str:
    """Percent-encode an identifying value, spaces included, as ``%20``."""
    return quote(value, safe="")


class NestedQuery:
    """Base class for values packed under one query key.

    Subclasses are dataclasses listing their attributes in ``FIELDS``.
    Present attributes are emitted as ``camelName:value`` in that order.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ()

    def pairs(self) -> list[tuple[str, str]]:
        pairs = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if value is not None:
                pairs.append((to_camel(name), format_value(value)))
        return pairs

    def encode(self) -> str:
        return ",".join(f"{key}:{value}" for key, value in self.pairs())

    def is_empty(self) -> bool:
        return not self.pairs()


class SearchParameter:
    """Base class for a resource's generic search parameters.

    ``FIELDS`` lists scalar and nested attributes in emission order.
    ``KEYS`` overrides the query key of an attribute where it is not simply
    the camelCase attribute name.

    Unset attributes are skipped. A nested attribute with no present fields
    is skipped as well, key included.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ()
    KEYS: ClassVar[dict[str, str]] = {}

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            key = self.KEYS.get(name, to_camel(name))
            if isinstance(value, NestedQuery):
                if value.is_empty():
                    continue
                pairs.append((key, value.encode()))
            elif isinstance(value, (list, tuple)) and not value:
                continue
            else:
                pairs.append((key, format_value(value)))
        return pairs

    def encode(self) -> str:
        return urlencode(self.query_pairs(), quote_via=quote)

    def identity(self, path: str) -> list[tuple[str, str]]:
        """Identifying pairs that bypass the generic encoding.

        Raises:
            InvalidQueryParameter: If a required identifying field is unset.
        """
        return []


def compose_query(
    identity: Sequence[tuple[str, str]] = (),
    param: SearchParameter | None = None,
) -> str:
    """Build the full query string for a request.

    Args:
        identity: Identifying ``(key, value)`` pairs, percent-encoded here
            and placed first.
        param: Generic search parameters, or None for parameterless calls.

    Returns:
        The query string without a leading ``?``; empty if nothing is set.
    """
    parts = [f"{key}={percent_encode(value)}" for key, value in identity]
    if param is not None:
        generic = param.encode()
        if generic:
            parts.append(generic)
    query = "&".join(parts)
    logger.debug(f"Encoded query: {query}")
    return query


# ------------------------------------------------------------------ character


@dataclass
class CharacterSearchParameter(SearchParameter):
    FIELDS: ClassVar[tuple[str, ...]] = ("job_id", "job_grow_id", "word_type", "limit")

    # path and identity, outside the generic encoding
    server: Server = Server.ALL
    name: str | None = None

    job_id: str | None = None
    job_grow_id: str | None = None
    word_type: WordType | None = None
    limit: int | None = None

    def identity(self, path: str) -> list[tuple[str, str]]:
        if not self.name:
            raise InvalidQueryParameter(path, "character name must be set before searching")
        return [("characterName", self.name)]


@dataclass
class TimelineParameter(SearchParameter):
    """Parameters for a character's timeline.

    ``codes`` is sent as one comma-joined ``code`` value; dates are
    ``YYYY-MM-DD HH:MM`` strings or datetimes.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ("limit", "codes", "start_date", "end_date", "next")
    KEYS: ClassVar[dict[str, str]] = {"codes": "code"}

    limit: int | None = None
    codes: Sequence[int] | None = None
    start_date: datetime | str | None = None
    end_date: datetime | str | None = None
    next: str | None = None


# ----------------------------------------------------------------------- item


@dataclass
class ItemQuery(NestedQuery):
    FIELDS: ClassVar[tuple[str, ...]] = ("min_level", "max_level", "rarity")

    min_level: int | None = None
    max_level: int | None = None
    rarity: ItemRarity | None = None


@dataclass
class ItemSearchParameter(SearchParameter):
    FIELDS: ClassVar[tuple[str, ...]] = ("limit", "word_type", "query")
    KEYS: ClassVar[dict[str, str]] = {"query": "q"}

    name: str | None = None

    limit: int | None = None
    word_type: WordType | None = None
    query: ItemQuery = field(default_factory=ItemQuery)

    def identity(self, path: str) -> list[tuple[str, str]]:
        if not self.name:
            raise InvalidQueryParameter(path, "item name must be set before searching")
        return [("itemName", self.name)]


# -------------------------------------------------------------------- auction


@dataclass
class AuctionSort(NestedQuery):
    FIELDS: ClassVar[tuple[str, ...]] = ("unit_price", "reinforce", "auction_no")

    unit_price: SortOrder | None = None
    reinforce: SortOrder | None = None
    auction_no: SortOrder | None = None


@dataclass
class AuctionQuery(NestedQuery):
    FIELDS: ClassVar[tuple[str, ...]] = (
        "min_level",
        "max_level",
        "rarity",
        "min_reinforce",
        "max_reinforce",
        "min_refine",
        "max_refine",
        "min_adventure_fame",
        "max_adventure_fame",
    )

    min_level: int | None = None
    max_level: int | None = None
    rarity: ItemRarity | None = None
    min_reinforce: int | None = None
    max_reinforce: int | None = None
    min_refine: int | None = None
    max_refine: int | None = None
    min_adventure_fame: int | None = None
    max_adventure_fame: int | None = None


@dataclass
class AuctionSearchParameter(SearchParameter):
    FIELDS: ClassVar[tuple[str, ...]] = ("limit", "sort", "word_type", "word_short", "query")
    KEYS: ClassVar[dict[str, str]] = {"query": "q"}

    item_id: str | None = None
    item_name: str | None = None

    limit: int | None = None
    sort: AuctionSort = field(default_factory=AuctionSort)
    word_type: WordType | None = None
    word_short: bool | None = None
    query: AuctionQuery = field(default_factory=AuctionQuery)

    def identity(self, path: str) -> list[tuple[str, str]]:
        """The name wins when both the item name and id are set."""
        if self.item_name:
            return [("itemName", self.item_name)]
        if self.item_id:
            return [("itemId", self.item_id)]
        raise InvalidQueryParameter(path, "item_id or item_name must be set")

    def sold(self) -> "AuctionSoldParameter":
        """Project onto the fields the sold-history endpoint accepts."""
        return AuctionSoldParameter(
            limit=self.limit,
            word_type=self.word_type,
            word_short=self.word_short,
        )


@dataclass
class AuctionSoldParameter(SearchParameter):
    FIELDS: ClassVar[tuple[str, ...]] = ("limit", "word_type", "word_short")

    limit: int | None = None
    word_type: WordType | None = None
    word_short: bool | None = None
