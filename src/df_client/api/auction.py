"""Auction house search and sale history."""

from dataclasses import replace
from typing import TYPE_CHECKING

from df_client.envelope import unwrap_rows
from df_client.models import AuctionItem, AuctionSoldItem, ItemRarity
from df_client.query import AuctionQuery, AuctionSearchParameter, AuctionSort, SortOrder, WordType

if TYPE_CHECKING:
    from df_client.client import DfClient


class AuctionHandler:
    """Builder for ``/auction`` and ``/auction-sold`` searches.

    Either ``item_name`` or ``item_id`` must be set before ``search()`` or
    ``sold()``; the name is used when both are.

    Example:
        ```python
        rows = await (
            client.auction()
            .item_name("무색 큐브 조각")
            .sort_by_unit_price(SortOrder.ASC)
            .limit(20)
            .search()
        )
        ```
    """

    def __init__(self, client: "DfClient"):
        self._client = client
        self.param = AuctionSearchParameter()

    async def search(self) -> list[AuctionItem]:
        path = "auction"
        identity = self.param.identity(path)
        response = await self._client.get(path, self.param, identity)
        return unwrap_rows(response, AuctionItem.from_dict)

    async def sold(self) -> list[AuctionSoldItem]:
        """Recent sales; only ``limit``, ``word_type`` and ``word_short`` apply."""
        path = "auction-sold"
        identity = self.param.identity(path)
        response = await self._client.get(path, self.param.sold(), identity)
        return unwrap_rows(response, AuctionSoldItem.from_dict)

    def with_param(self, param: AuctionSearchParameter) -> "AuctionHandler":
        self.param = replace(param, sort=replace(param.sort), query=replace(param.query))
        return self

    def item_id(self, item_id: str) -> "AuctionHandler":
        self.param.item_id = item_id
        return self

    def item_name(self, item_name: str) -> "AuctionHandler":
        self.param.item_name = item_name
        return self

    def limit(self, limit: int) -> "AuctionHandler":
        self.param.limit = limit
        return self

    def word_type(self, word_type: WordType) -> "AuctionHandler":
        self.param.word_type = word_type
        return self

    def word_short(self, word_short: bool) -> "AuctionHandler":
        self.param.word_short = word_short
        return self

    # sort

    def sort(self, sort: AuctionSort) -> "AuctionHandler":
        self.param.sort = replace(sort)
        return self

    def sort_by_unit_price(self, order: SortOrder) -> "AuctionHandler":
        self.param.sort.unit_price = order
        return self

    def sort_by_reinforce(self, order: SortOrder) -> "AuctionHandler":
        self.param.sort.reinforce = order
        return self

    def sort_by_auction_no(self, order: SortOrder) -> "AuctionHandler":
        self.param.sort.auction_no = order
        return self

    # q

    def query(self, query: AuctionQuery) -> "AuctionHandler":
        self.param.query = replace(query)
        return self

    def min_level(self, min_level: int) -> "AuctionHandler":
        self.param.query.min_level = min_level
        return self

    def max_level(self, max_level: int) -> "AuctionHandler":
        self.param.query.max_level = max_level
        return self

    def level(self, min_level: int, max_level: int) -> "AuctionHandler":
        return self.min_level(min_level).max_level(max_level)

    def rarity(self, rarity: ItemRarity) -> "AuctionHandler":
        self.param.query.rarity = rarity
        return self

    def min_reinforce(self, min_reinforce: int) -> "AuctionHandler":
        self.param.query.min_reinforce = min_reinforce
        return self

    def max_reinforce(self, max_reinforce: int) -> "AuctionHandler":
        self.param.query.max_reinforce = max_reinforce
        return self

    def reinforce(self, min_reinforce: int, max_reinforce: int) -> "AuctionHandler":
        return self.min_reinforce(min_reinforce).max_reinforce(max_reinforce)

    def min_refine(self, min_refine: int) -> "AuctionHandler":
        self.param.query.min_refine = min_refine
        return self

    def max_refine(self, max_refine: int) -> "AuctionHandler":
        self.param.query.max_refine = max_refine
        return self

    def refine(self, min_refine: int, max_refine: int) -> "AuctionHandler":
        return self.min_refine(min_refine).max_refine(max_refine)

    def min_adventure_fame(self, min_adventure_fame: int) -> "AuctionHandler":
        self.param.query.min_adventure_fame = min_adventure_fame
        return self

    def max_adventure_fame(self, max_adventure_fame: int) -> "AuctionHandler":
        self.param.query.max_adventure_fame = max_adventure_fame
        return self

    def adventure_fame(self, min_adventure_fame: int, max_adventure_fame: int) -> "AuctionHandler":
        return self.min_adventure_fame(min_adventure_fame).max_adventure_fame(max_adventure_fame)
