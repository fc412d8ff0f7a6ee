"""Character search results and per-character detail shapes.

Every detail endpoint repeats the character summary (id, name, level, job,
adventure, guild) next to its own section, so the detail classes extend
``CharacterInfo``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from df_client.models.common import (
    Item,
    ItemExt,
    ItemRarity,
    ItemWithRarity,
    Server,
    StatusValue,
    parse_kst,
    parse_status,
)


@dataclass
class Job:
    id: str
    name: str


@dataclass
class Guild:
    id: str
    name: str


@dataclass
class Character:
    id: str
    name: str
    server: Server
    level: int
    job: Job
    job_grow: Job

    @classmethod
    def from_dict(cls, data: dict) -> "Character":
        return cls(
            id=data["characterId"],
            name=data["characterName"],
            server=Server(data["serverId"]),
            level=data["level"],
            job=Job(id=data["jobId"], name=data["jobName"]),
            job_grow=Job(id=data["jobGrowId"], name=data["jobGrowName"]),
        )


@dataclass
class CharacterInfo:
    id: str
    name: str
    level: int
    job: Job
    job_grow: Job
    # null for characters that predate adventures
    adventure_name: str = ""
    guild: Guild | None = None

    @staticmethod
    def _summary(data: dict) -> dict[str, Any]:
        guild = None
        if data.get("guildId"):
            guild = Guild(id=data["guildId"], name=data.get("guildName") or "")
        return {
            "id": data["characterId"],
            "name": data["characterName"],
            "level": data["level"],
            "job": Job(id=data["jobId"], name=data["jobName"]),
            "job_grow": Job(id=data["jobGrowId"], name=data["jobGrowName"]),
            "adventure_name": data.get("adventureName") or "",
            "guild": guild,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterInfo":
        return cls(**cls._summary(data))


# ------------------------------------------------------------------ equipment


@dataclass
class Enchant:
    explain: str | None = None
    status: dict[str, StatusValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Enchant":
        return cls(explain=data.get("explain"), status=parse_status(data.get("status")))


@dataclass
class Equipment:
    slot_id: str
    slot_name: str
    item: ItemExt
    set_item_id: str | None = None
    set_item_name: str | None = None
    item_grade_name: str | None = None
    enchant: Enchant | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Equipment":
        enchant = data.get("enchant")
        return cls(
            slot_id=data["slotId"],
            slot_name=data["slotName"],
            item=ItemExt.from_dict(data),
            set_item_id=data.get("setItemId"),
            set_item_name=data.get("setItemName"),
            item_grade_name=data.get("itemGradeName"),
            enchant=Enchant.from_dict(enchant) if enchant else None,
        )


@dataclass
class CharacterEquipments(CharacterInfo):
    equipments: list[Equipment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterEquipments":
        return cls(
            **cls._summary(data),
            equipments=[Equipment.from_dict(row) for row in data.get("equipment") or []],
        )


# --------------------------------------------------------------------- avatar


@dataclass
class Emblem:
    slot_no: int
    slot_color: str
    item_name: str
    item_rarity: ItemRarity

    @classmethod
    def from_dict(cls, data: dict) -> "Emblem":
        return cls(
            slot_no=data["slotNo"],
            slot_color=data["slotColor"],
            item_name=data["itemName"],
            item_rarity=ItemRarity(data["itemRarity"]),
        )


@dataclass
class Avatar:
    slot_id: str
    slot_name: str
    item: ItemWithRarity
    clone: Item | None = None
    random: Item | None = None
    option_ability: str | None = None
    emblems: list[Emblem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Avatar":
        return cls(
            slot_id=data["slotId"],
            slot_name=data["slotName"],
            item=ItemWithRarity.from_dict(data),
            clone=Item.from_optional(data.get("clone")),
            random=Item.from_optional(data.get("random")),
            option_ability=data.get("optionAbility"),
            emblems=[Emblem.from_dict(row) for row in data.get("emblems") or []],
        )


@dataclass
class CharacterAvatars(CharacterInfo):
    avatars: list[Avatar] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterAvatars":
        return cls(
            **cls._summary(data),
            avatars=[Avatar.from_dict(row) for row in data.get("avatar") or []],
        )


# ------------------------------------------------------------------- creature


@dataclass
class Artifact:
    slot_color: str
    item_name: str
    item_available_level: int
    item_rarity: ItemRarity

    @classmethod
    def from_dict(cls, data: dict) -> "Artifact":
        return cls(
            slot_color=data["slotColor"],
            item_name=data["itemName"],
            item_available_level=data["itemAvailableLevel"],
            item_rarity=ItemRarity(data["itemRarity"]),
        )


@dataclass
class Creature:
    item: ItemWithRarity
    clone: Item | None = None
    artifacts: list[Artifact] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Creature":
        return cls(
            item=ItemWithRarity.from_dict(data),
            clone=Item.from_optional(data.get("clone")),
            artifacts=[Artifact.from_dict(row) for row in data.get("artifact") or []],
        )


@dataclass
class CharacterCreature(CharacterInfo):
    creature: Creature | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterCreature":
        creature = data.get("creature")
        return cls(**cls._summary(data), creature=Creature.from_dict(creature) if creature else None)


# ----------------------------------------------------------------------- flag


@dataclass
class Gem:
    slot_no: int
    item: ItemWithRarity


@dataclass
class Flag:
    item: ItemWithRarity
    reinforce: int
    reinforce_status: dict[str, StatusValue] = field(default_factory=dict)
    gems: list[Gem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Flag":
        return cls(
            item=ItemWithRarity.from_dict(data),
            reinforce=data.get("reinforce") or 0,
            reinforce_status=parse_status(data.get("reinforceStatus")),
            gems=[
                Gem(slot_no=row["slotNo"], item=ItemWithRarity.from_dict(row))
                for row in data.get("gems") or []
            ],
        )


@dataclass
class CharacterFlag(CharacterInfo):
    flag: Flag | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterFlag":
        flag = data.get("flag")
        return cls(**cls._summary(data), flag=Flag.from_dict(flag) if flag else None)


# ------------------------------------------------------------------- talisman


@dataclass
class Rune:
    slot_no: int
    item: Item


@dataclass
class Talisman:
    slot_no: int
    item: Item
    rune_types: list[str] = field(default_factory=list)
    runes: list[Rune] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Talisman":
        talisman = data["talisman"]
        return cls(
            slot_no=talisman["slotNo"],
            item=Item.from_dict(talisman),
            rune_types=talisman.get("runeTypes") or [],
            runes=[Rune(slot_no=row["slotNo"], item=Item.from_dict(row)) for row in data.get("runes") or []],
        )


@dataclass
class CharacterTalismans(CharacterInfo):
    talismans: list[Talisman] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterTalismans":
        return cls(
            **cls._summary(data),
            talismans=[Talisman.from_dict(row) for row in data.get("talismans") or []],
        )


# ---------------------------------------------------------------------- skill


@dataclass
class Skill:
    id: str
    name: str
    level: int
    required_level: int
    cost_type: str

    @classmethod
    def from_dict(cls, data: dict) -> "Skill":
        return cls(
            id=data["skillId"],
            name=data["name"],
            level=data["level"],
            required_level=data["requiredLevel"],
            cost_type=data["costType"],
        )


@dataclass
class CharacterSkillStyle(CharacterInfo):
    active: list[Skill] = field(default_factory=list)
    passive: list[Skill] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterSkillStyle":
        # {"skill": {"style": {"active": [...], "passive": [...]}}}
        style = (data.get("skill") or {}).get("style") or {}
        return cls(
            **cls._summary(data),
            active=[Skill.from_dict(row) for row in style.get("active") or []],
            passive=[Skill.from_dict(row) for row in style.get("passive") or []],
        )


# ------------------------------------------------------------------- timeline


@dataclass
class TimelineRow:
    code: int
    name: str
    date: datetime
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class Timeline:
    start: datetime
    end: datetime
    next: str | None = None
    rows: list[TimelineRow] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Timeline":
        return cls(
            start=parse_kst(data["date"]["start"], "%Y-%m-%d %H:%M"),
            end=parse_kst(data["date"]["end"], "%Y-%m-%d %H:%M"),
            next=data.get("next"),
            rows=[
                TimelineRow(
                    code=row["code"],
                    name=row["name"],
                    date=parse_kst(row["date"], "%Y-%m-%d %H:%M"),
                    data=row.get("data") or {},
                )
                for row in data.get("rows") or []
            ],
        )


@dataclass
class CharacterTimeline(CharacterInfo):
    timeline: Timeline | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterTimeline":
        timeline = data.get("timeline")
        return cls(**cls._summary(data), timeline=Timeline.from_dict(timeline) if timeline else None)


# ----------------------------------------------------------------------- buff


@dataclass
class BuffSkillInfo:
    id: str
    name: str
    level: int
    # format string, e.g. "지속 시간 : {value1}초", filled from ``values``
    desc: str
    values: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "BuffSkillInfo":
        option = data.get("option") or {}
        return cls(
            id=data["skillId"],
            name=data["name"],
            level=option.get("level") or 0,
            desc=option.get("desc") or "",
            values=option.get("values") or [],
        )


@dataclass
class BuffEnhance:
    """Buff-skill enhancement from one equipment slot kind.

    A single fetch fills only the section it was asked for; the other two
    stay None until merged by ``CharacterBuffHandler.all``.
    """

    skill: BuffSkillInfo | None = None
    equipments: list[Equipment] | None = None
    avatars: list[Avatar] | None = None
    creature: Creature | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "BuffEnhance":
        skill = data.get("skillInfo")
        equipments = data.get("equipment")
        avatars = data.get("avatar")
        # the API sends the creature as a one-element list
        creatures = data.get("creature") or []
        return cls(
            skill=BuffSkillInfo.from_dict(skill) if skill else None,
            equipments=[Equipment.from_dict(row) for row in equipments] if equipments is not None else None,
            avatars=[Avatar.from_dict(row) for row in avatars] if avatars is not None else None,
            creature=Creature.from_dict(creatures[-1]) if creatures else None,
        )


@dataclass
class CharacterBuffEnhance(CharacterInfo):
    buff: BuffEnhance | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterBuffEnhance":
        # {"skill": {"buff": {...} | null}}
        buff = (data.get("skill") or {}).get("buff")
        return cls(**cls._summary(data), buff=BuffEnhance.from_dict(buff) if buff else None)
