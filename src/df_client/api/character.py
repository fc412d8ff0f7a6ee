"""Character search, per-character details and buff enhancements.

Example:
    ```python
    found = await client.character().name("홍길동").server(Server.CAIN).search()
    details = client.character().of(found[0])
    equipments = await details.equipments()
    buff = await details.buff().all()
    ```
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from df_client.envelope import unwrap_object, unwrap_rows
from df_client.models import (
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
    Server,
)
from df_client.query import CharacterSearchParameter, TimelineParameter, WordType

if TYPE_CHECKING:
    from df_client.client import DfClient

logger = logging.getLogger(__name__)


class CharacterHandler:
    def __init__(self, client: "DfClient"):
        self._client = client
        self.param = CharacterSearchParameter()

    async def search(self) -> list[Character]:
        """Search characters by name on ``server`` (all servers by default)."""
        path = f"servers/{self.param.server}/characters"
        identity = self.param.identity(path)
        response = await self._client.get(path, self.param, identity)
        return unwrap_rows(response, Character.from_dict)

    def of(self, character: Character) -> "SpecificCharacterHandler":
        return SpecificCharacterHandler(self._client, character.server, character.id)

    def of_id(self, server: Server, character_id: str) -> "SpecificCharacterHandler":
        return SpecificCharacterHandler(self._client, server, character_id)

    def name(self, name: str) -> "CharacterHandler":
        self.param.name = name
        return self

    def server(self, server: Server) -> "CharacterHandler":
        self.param.server = server
        return self

    def job_id(self, job_id: str) -> "CharacterHandler":
        self.param.job_id = job_id
        return self

    def job_grow_id(self, job_grow_id: str) -> "CharacterHandler":
        self.param.job_grow_id = job_grow_id
        return self

    def word_type(self, word_type: WordType) -> "CharacterHandler":
        self.param.word_type = word_type
        return self

    def limit(self, limit: int) -> "CharacterHandler":
        self.param.limit = limit
        return self


class SpecificCharacterHandler:
    """Detail endpoints under ``/servers/{server}/characters/{id}``.

    Each call returns a bare object (no ``rows`` envelope) that repeats the
    character summary next to the requested section.
    """

    def __init__(self, client: "DfClient", server: Server, character_id: str):
        self._client = client
        self.server = server
        self.character_id = character_id

    @property
    def path(self) -> str:
        return f"servers/{self.server}/characters/{self.character_id}"

    async def _fetch(self, section, factory, param=None):
        path = f"{self.path}/{section}" if section else self.path
        response = await self._client.get(path, param)
        return unwrap_object(response, factory)

    async def info(self) -> CharacterInfo:
        return await self._fetch("", CharacterInfo.from_dict)

    async def equipments(self) -> CharacterEquipments:
        return await self._fetch("equip/equipment", CharacterEquipments.from_dict)

    async def avatars(self) -> CharacterAvatars:
        return await self._fetch("equip/avatar", CharacterAvatars.from_dict)

    async def creature(self) -> CharacterCreature:
        return await self._fetch("equip/creature", CharacterCreature.from_dict)

    async def flag(self) -> CharacterFlag:
        return await self._fetch("equip/flag", CharacterFlag.from_dict)

    async def talismans(self) -> CharacterTalismans:
        return await self._fetch("equip/talisman", CharacterTalismans.from_dict)

    async def skill_style(self) -> CharacterSkillStyle:
        return await self._fetch("skill/style", CharacterSkillStyle.from_dict)

    async def timeline(
        self,
        limit: int | None = None,
        codes: Sequence[int] | None = None,
        start_date: datetime | str | None = None,
        end_date: datetime | str | None = None,
        next: str | None = None,
    ) -> CharacterTimeline:
        """Fetch the character's timeline.

        Args:
            limit: Maximum number of rows.
            codes: Timeline event codes, sent comma-joined.
            start_date: Start of the window (``YYYY-MM-DD HH:MM``).
            end_date: End of the window (``YYYY-MM-DD HH:MM``).
            next: Continuation token from a previous ``Timeline.next``.
        """
        param = TimelineParameter(
            limit=limit,
            codes=codes,
            start_date=start_date,
            end_date=end_date,
            next=next,
        )
        return await self._fetch("timeline", CharacterTimeline.from_dict, param)

    async def image(self, zoom: int = 1) -> bytes:
        return await self._client.image().character(self.server, self.character_id, zoom)

    def buff(self) -> "CharacterBuffHandler":
        return CharacterBuffHandler(self)


class CharacterBuffHandler:
    """Buff-skill enhancement from equipment, avatars and creature."""

    def __init__(self, character: SpecificCharacterHandler):
        self._character = character

    async def equipments(self) -> CharacterBuffEnhance:
        return await self._character._fetch("skill/buff/equip/equipment", CharacterBuffEnhance.from_dict)

    async def avatars(self) -> CharacterBuffEnhance:
        return await self._character._fetch("skill/buff/equip/avatar", CharacterBuffEnhance.from_dict)

    async def creature(self) -> CharacterBuffEnhance:
        return await self._character._fetch("skill/buff/equip/creature", CharacterBuffEnhance.from_dict)

    async def all(self) -> CharacterBuffEnhance:
        """Fetch all three concurrently and merge them into one result.

        The equipment result is the base; its ``buff`` gains the avatars and
        creature of the other two. If the character has no buff skill the
        equipment result is returned unchanged.

        The first failure cancels the requests still in flight and is raised
        once they have stopped.

        Raises:
            DfError: The first failure among the three requests.
        """
        try:
            async with asyncio.TaskGroup() as group:
                equipments_task = group.create_task(self.equipments())
                avatars_task = group.create_task(self.avatars())
                creature_task = group.create_task(self.creature())
        except ExceptionGroup as errors:
            raise errors.exceptions[0] from None

        equipments = equipments_task.result()
        avatars = avatars_task.result()
        creature = creature_task.result()
        if equipments.buff is None:
            logger.debug(f"No buff skill for {self._character.path}")
            return equipments
        equipments.buff = replace(
            equipments.buff,
            avatars=avatars.buff.avatars if avatars.buff else None,
            creature=creature.buff.creature if creature.buff else None,
        )
        return equipments
