"""Item search and detail shapes."""

from dataclasses import dataclass, field

from df_client.models.common import ItemRarity, ItemType, ItemWithRarity, StatusValue, parse_status


@dataclass
class SearchItem(ItemWithRarity):
    type: ItemType
    available_level: int

    @classmethod
    def from_dict(cls, data: dict) -> "SearchItem":
        return cls(
            id=data["itemId"],
            name=data["itemName"],
            rarity=ItemRarity(data["itemRarity"]),
            type=ItemType.from_dict(data),
            available_level=data["itemAvailableLevel"],
        )


@dataclass
class ShopObtainInfo:
    name: str
    details: list[str]


@dataclass
class ObtainInfo:
    dungeons: dict[str, list[str]] = field(default_factory=dict)
    shops: list[ShopObtainInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "ObtainInfo":
        data = data or {}
        # dungeon: [{"type": "레이드", "dungeon": [{"name": ...}]}]
        dungeons = {
            entry["type"]: [row["name"] for row in entry.get("dungeon") or []]
            for entry in data.get("dungeon") or []
        }
        # shop: [{"rows": [{"name": ..., "details": [...]}]}]
        shops = [
            ShopObtainInfo(name=row["name"], details=row.get("details") or [])
            for outer in data.get("shop") or []
            for row in outer.get("rows") or []
        ]
        return cls(dungeons=dungeons, shops=shops)


@dataclass
class ItemInfo(ItemWithRarity):
    type: ItemType
    available_level: int
    explain: str = ""
    explain_detail: str = ""
    flavor_text: str = ""
    set_item_id: str | None = None
    set_item_name: str | None = None
    status: dict[str, StatusValue] = field(default_factory=dict)
    obtain_info: ObtainInfo = field(default_factory=ObtainInfo)
    hashtags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ItemInfo":
        return cls(
            id=data["itemId"],
            name=data["itemName"],
            rarity=ItemRarity(data["itemRarity"]),
            type=ItemType.from_dict(data),
            available_level=data["itemAvailableLevel"],
            explain=data.get("itemExplain") or "",
            explain_detail=data.get("itemExplainDetail") or "",
            flavor_text=data.get("itemFlavorText") or "",
            set_item_id=data.get("setItemId"),
            set_item_name=data.get("setItemName"),
            status=parse_status(data.get("itemStatus")),
            obtain_info=ObtainInfo.from_dict(data.get("obtainInfo")),
            hashtags=data.get("hashtag") or [],
        )
