"""Item search and details."""

from typing import TYPE_CHECKING

from df_client.envelope import unwrap_object, unwrap_rows
from df_client.models import ItemInfo, ItemRarity, SearchItem
from df_client.query import ItemSearchParameter, WordType

if TYPE_CHECKING:
    from df_client.client import DfClient


class ItemHandler:
    def __init__(self, client: "DfClient"):
        self._client = client
        self.param = ItemSearchParameter()

    async def search(self) -> list[SearchItem]:
        """Search items by name; ``name()`` must be set first."""
        path = "items"
        identity = self.param.identity(path)
        response = await self._client.get(path, self.param, identity)
        return unwrap_rows(response, SearchItem.from_dict)

    async def info(self, item_id: str) -> ItemInfo:
        response = await self._client.get(f"items/{item_id}")
        return unwrap_object(response, ItemInfo.from_dict)

    async def image(self, item_id: str) -> bytes:
        return await self._client.image().item(item_id)

    def name(self, item_name: str) -> "ItemHandler":
        self.param.name = item_name
        return self

    def limit(self, limit: int) -> "ItemHandler":
        self.param.limit = limit
        return self

    def word_type(self, word_type: WordType) -> "ItemHandler":
        self.param.word_type = word_type
        return self

    def min_level(self, min_level: int) -> "ItemHandler":
        self.param.query.min_level = min_level
        return self

    def max_level(self, max_level: int) -> "ItemHandler":
        self.param.query.max_level = max_level
        return self

    def level(self, min_level: int, max_level: int) -> "ItemHandler":
        return self.min_level(min_level).max_level(max_level)

    def rarity(self, rarity: ItemRarity) -> "ItemHandler":
        self.param.query.rarity = rarity
        return self
