"""Shapes shared by several resources."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

# Dates in API payloads are naive Korean Standard Time.
KST = timezone(timedelta(hours=9))


class Server(Enum):
    ALL = "all"
    ANTON = "anton"
    BAKAL = "bakal"
    CAIN = "cain"
    CASILLAS = "casillas"
    DIREGIE = "diregie"
    HILDER = "hilder"
    PREY = "prey"
    SIROCO = "siroco"

    def __str__(self) -> str:
        return self.value


class ItemRarity(Enum):
    """Item rarity, carried on the wire by its Korean name."""

    COMMON = "커먼"
    UNCOMMON = "언커먼"
    RARE = "레어"
    UNIQUE = "유니크"
    CHRONICLE = "크로니클"
    LEGENDARY = "레전더리"
    EPIC = "에픽"
    MYTHIC = "신화"


def parse_kst(value: str, fmt: str = "%Y-%m-%d %H:%M:%S") -> datetime:
    return datetime.strptime(value, fmt).replace(tzinfo=KST)


@dataclass
class Item:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        return cls(id=data["itemId"], name=data["itemName"])

    @classmethod
    def from_optional(cls, data: dict | None) -> "Item | None":
        """Build an item, or None when the slot is empty (null id or name)."""
        if not data or data.get("itemId") is None or data.get("itemName") is None:
            return None
        return cls.from_dict(data)


@dataclass
class ItemWithRarity(Item):
    rarity: ItemRarity

    @classmethod
    def from_dict(cls, data: dict) -> "ItemWithRarity":
        return cls(
            id=data["itemId"],
            name=data["itemName"],
            rarity=ItemRarity(data["itemRarity"]),
        )


@dataclass
class ItemType:
    id: str
    name: str
    detail_id: str
    detail_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "ItemType":
        return cls(
            id=data["itemTypeId"],
            name=data.get("itemType") or "",
            detail_id=data["itemTypeDetailId"],
            detail_name=data.get("itemTypeDetail") or "",
        )


@dataclass
class ItemExt(ItemWithRarity):
    """An item as it appears in equipment and auction listings."""

    type: ItemType
    available_level: int
    refine: int = 0
    reinforce: int = 0
    amplification_name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ItemExt":
        return cls(
            id=data["itemId"],
            name=data["itemName"],
            rarity=ItemRarity(data["itemRarity"]),
            type=ItemType.from_dict(data),
            available_level=data["itemAvailableLevel"],
            refine=data.get("refine") or 0,
            reinforce=data.get("reinforce") or 0,
            amplification_name=data.get("amplificationName"),
        )


@dataclass
class StatusValue:
    value: float
    suffix: str | None = None

    def __str__(self) -> str:
        if self.suffix:
            return f"{self.value:g}{self.suffix}"
        return f"{self.value:g}"


def parse_status(rows: list[dict] | None) -> dict[str, StatusValue]:
    """Turn ``[{"name": "힘", "value": 120}, {"name": ..., "value": "5%"}]`` into a dict."""
    status = {}
    for row in rows or []:
        value = row["value"]
        if isinstance(value, str):
            if not value.endswith("%"):
                raise ValueError(f"status value for {row['name']!r} should end with '%': {value!r}")
            status[row["name"]] = StatusValue(value=float(value[:-1]), suffix="%")
        else:
            status[row["name"]] = StatusValue(value=float(value))
    return status
