"""Typed shapes for API responses.

Each dataclass has a ``from_dict`` constructor taking the decoded JSON
object for one record.
"""

from df_client.models.auction import AuctionItem, AuctionSoldItem
from df_client.models.character import (
    Artifact,
    Avatar,
    BuffEnhance,
    BuffSkillInfo,
    Character,
    CharacterAvatars,
    CharacterBuffEnhance,
    CharacterCreature,
    CharacterEquipments,
    CharacterFlag,
    CharacterInfo,
    CharacterSkillStyle,
    CharacterTalismans,
    CharacterTimeline,
    Creature,
    Emblem,
    Enchant,
    Equipment,
    Flag,
    Gem,
    Guild,
    Job,
    Rune,
    Skill,
    Talisman,
    Timeline,
    TimelineRow,
)
from df_client.models.common import (
    KST,
    Item,
    ItemExt,
    ItemRarity,
    ItemType,
    ItemWithRarity,
    Server,
    StatusValue,
)
from df_client.models.item import ItemInfo, ObtainInfo, SearchItem, ShopObtainInfo

__all__ = [
    "KST",
    "Artifact",
    "AuctionItem",
    "AuctionSoldItem",
    "Avatar",
    "BuffEnhance",
    "BuffSkillInfo",
    "Character",
    "CharacterAvatars",
    "CharacterBuffEnhance",
    "CharacterCreature",
    "CharacterEquipments",
    "CharacterFlag",
    "CharacterInfo",
    "CharacterSkillStyle",
    "CharacterTalismans",
    "CharacterTimeline",
    "Creature",
    "Emblem",
    "Enchant",
    "Equipment",
    "Flag",
    "Gem",
    "Guild",
    "Item",
    "ItemExt",
    "ItemInfo",
    "ItemRarity",
    "ItemType",
    "ItemWithRarity",
    "Job",
    "ObtainInfo",
    "Rune",
    "SearchItem",
    "Server",
    "ShopObtainInfo",
    "Skill",
    "StatusValue",
    "Talisman",
    "Timeline",
    "TimelineRow",
]
