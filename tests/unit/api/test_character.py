"""Tests for the character handlers."""

import asyncio
from datetime import datetime
from urllib.parse import parse_qsl

import httpx
import pytest

from df_client.errors import InvalidQueryParameter, ServerError
from df_client.models import KST, Character, ItemRarity, Server
from df_client.query import WordType
from df_client.testing import RecordingHandler, error_response, make_client, object_response, rows_response

CHARACTER_ROW = {
    "serverId": "cain",
    "characterId": "abc123",
    "characterName": "홍길동",
    "level": 110,
    "jobId": "j1",
    "jobGrowId": "g1",
    "jobName": "귀검사(남)",
    "jobGrowName": "眞 웨펀마스터",
}

SUMMARY = {
    "characterId": "abc123",
    "characterName": "홍길동",
    "level": 110,
    "jobId": "j1",
    "jobGrowId": "g1",
    "jobName": "귀검사(남)",
    "jobGrowName": "眞 웨펀마스터",
    "adventureName": "모험단",
    "guildId": None,
    "guildName": None,
}

EQUIPMENT = {
    "slotId": "WEAPON",
    "slotName": "무기",
    "itemId": "w1",
    "itemName": "소울 이터",
    "itemRarity": "에픽",
    "itemTypeId": "t1",
    "itemType": "무기",
    "itemTypeDetailId": "d1",
    "itemTypeDetail": "소검",
    "itemAvailableLevel": 105,
    "reinforce": 12,
    "refine": 8,
    "enchant": {"status": [{"name": "힘", "value": 60}]},
}

AVATAR = {
    "slotId": "HEADGEAR",
    "slotName": "모자 아바타",
    "itemId": "av1",
    "itemName": "모자",
    "itemRarity": "레어",
    "clone": {"itemId": None, "itemName": None},
    "emblems": [{"slotNo": 1, "slotColor": "빨강", "itemName": "엠블렘", "itemRarity": "유니크"}],
}

CREATURE = {
    "itemId": "cr1",
    "itemName": "크리쳐",
    "itemRarity": "레전더리",
    "clone": None,
    "artifact": [{"slotColor": "RED", "itemName": "아티팩트", "itemAvailableLevel": 100, "itemRarity": "레어"}],
}

SKILL_INFO = {"skillId": "s1", "name": "버프", "option": {"level": 30, "desc": "힘 {value1}", "values": ["100"]}}


def buff_payload(**sections) -> dict:
    return {**SUMMARY, "skill": {"buff": {"skillInfo": SKILL_INFO, **sections}}}


def route(routes: dict[str, httpx.Response]) -> RecordingHandler:
    """Answer by the request path's last segment."""
    return RecordingHandler(lambda request: routes[request.url.path.rsplit("/", 1)[-1]])


class TestCharacterSearch:
    @pytest.mark.unit
    async def test_search(self):
        handler = RecordingHandler(lambda request: rows_response([CHARACTER_ROW]))

        async with make_client(handler) as client:
            characters = await (
                client.character()
                .limit(5)
                .word_type(WordType.FULL)
                .job_id("j1")
                .name("홍 길동")
                .server(Server.CAIN)
                .search()
            )

        assert handler.requests[0].url.path == "/df/servers/cain/characters"
        assert handler.last_query.startswith("characterName=%ED%99%8D%20")
        assert parse_qsl(handler.last_query) == [
            ("characterName", "홍 길동"),
            ("jobId", "j1"),
            ("wordType", "full"),
            ("limit", "5"),
        ]
        assert characters == [
            Character.from_dict(CHARACTER_ROW),
        ]
        assert characters[0].server is Server.CAIN
        assert characters[0].job_grow.name == "眞 웨펀마스터"

    @pytest.mark.unit
    async def test_search_defaults_to_all_servers(self, empty_rows_handler, client):
        await client.character().name("홍길동").search()

        assert empty_rows_handler.requests[0].url.path == "/df/servers/all/characters"

    @pytest.mark.unit
    async def test_search_requires_name(self, empty_rows_handler, client):
        with pytest.raises(InvalidQueryParameter):
            await client.character().server(Server.CAIN).search()

        assert empty_rows_handler.requests == []


class TestSpecificCharacter:
    @pytest.mark.unit
    async def test_info(self):
        handler = RecordingHandler(lambda request: object_response(SUMMARY))

        async with make_client(handler) as client:
            info = await client.character().of_id(Server.CAIN, "abc123").info()

        assert handler.requests[0].url.path == "/df/servers/cain/characters/abc123"
        assert info.name == "홍길동"
        assert info.adventure_name == "모험단"
        assert info.guild is None

    @pytest.mark.unit
    async def test_of_uses_search_result(self):
        handler = RecordingHandler(lambda request: object_response({**SUMMARY, "equipment": [EQUIPMENT]}))
        character = Character.from_dict(CHARACTER_ROW)

        async with make_client(handler) as client:
            result = await client.character().of(character).equipments()

        assert handler.requests[0].url.path == "/df/servers/cain/characters/abc123/equip/equipment"
        equipment = result.equipments[0]
        assert equipment.slot_id == "WEAPON"
        assert equipment.item.reinforce == 12
        assert equipment.item.rarity is ItemRarity.EPIC
        assert equipment.enchant.status["힘"].value == 60

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("method", "section"),
        [
            ("avatars", "equip/avatar"),
            ("creature", "equip/creature"),
            ("flag", "equip/flag"),
            ("talismans", "equip/talisman"),
            ("skill_style", "skill/style"),
        ],
    )
    async def test_detail_paths(self, method, section):
        handler = RecordingHandler(lambda request: object_response(SUMMARY))

        async with make_client(handler) as client:
            result = await getattr(client.character().of_id(Server.SIROCO, "xyz"), method)()

        assert handler.requests[0].url.path == f"/df/servers/siroco/characters/xyz/{section}"
        assert result.id == "abc123"

    @pytest.mark.unit
    async def test_avatars(self):
        handler = RecordingHandler(lambda request: object_response({**SUMMARY, "avatar": [AVATAR]}))

        async with make_client(handler) as client:
            result = await client.character().of_id(Server.CAIN, "abc123").avatars()

        avatar = result.avatars[0]
        assert avatar.item.name == "모자"
        assert avatar.clone is None
        assert avatar.emblems[0].item_rarity is ItemRarity.UNIQUE

    @pytest.mark.unit
    async def test_timeline(self):
        payload = {
            **SUMMARY,
            "timeline": {
                "date": {"start": "2024-05-01 00:00", "end": "2024-05-02 00:00"},
                "next": "token-2",
                "rows": [{"code": 505, "name": "아이템 획득", "date": "2024-05-01 10:15", "data": {"itemId": "x"}}],
            },
        }
        handler = RecordingHandler(lambda request: object_response(payload))

        async with make_client(handler) as client:
            result = await client.character().of_id(Server.CAIN, "abc123").timeline(
                limit=10,
                codes=[504, 505],
                start_date=datetime(2024, 5, 1),
                end_date="2024-05-02 00:00",
            )

        assert handler.requests[0].url.path == "/df/servers/cain/characters/abc123/timeline"
        assert parse_qsl(handler.last_query) == [
            ("limit", "10"),
            ("code", "504,505"),
            ("startDate", "2024-05-01 00:00"),
            ("endDate", "2024-05-02 00:00"),
        ]
        assert result.timeline.next == "token-2"
        assert result.timeline.rows[0].date == datetime(2024, 5, 1, 10, 15, tzinfo=KST)
        assert result.timeline.rows[0].data == {"itemId": "x"}

    @pytest.mark.unit
    async def test_image(self):
        handler = RecordingHandler(lambda request: httpx.Response(200, content=b"png"))

        async with make_client(handler) as client:
            data = await client.character().of_id(Server.CAIN, "abc123").image(zoom=3)

        assert data == b"png"
        assert str(handler.requests[0].url) == "https://img-api.neople.co.kr/df/servers/cain/characters/abc123?zoom=3"


class TestCharacterBuff:
    @pytest.mark.unit
    async def test_single_section(self):
        handler = route({"equipment": object_response(buff_payload(equipment=[EQUIPMENT]))})

        async with make_client(handler) as client:
            result = await client.character().of_id(Server.CAIN, "abc123").buff().equipments()

        assert handler.requests[0].url.path == "/df/servers/cain/characters/abc123/skill/buff/equip/equipment"
        assert result.buff.skill.values == ["100"]
        assert result.buff.equipments[0].item.id == "w1"
        assert result.buff.avatars is None
        assert result.buff.creature is None

    @pytest.mark.unit
    async def test_all_merges_sections(self):
        handler = route(
            {
                "equipment": object_response(buff_payload(equipment=[EQUIPMENT])),
                "avatar": object_response(buff_payload(avatar=[AVATAR])),
                "creature": object_response(buff_payload(creature=[CREATURE])),
            }
        )

        async with make_client(handler) as client:
            result = await client.character().of_id(Server.CAIN, "abc123").buff().all()

        assert len(handler.requests) == 3
        assert result.name == "홍길동"
        assert result.buff.skill.name == "버프"
        assert [e.item.id for e in result.buff.equipments] == ["w1"]
        assert [a.item.id for a in result.buff.avatars] == ["av1"]
        assert result.buff.creature.item.id == "cr1"
        assert result.buff.creature.artifacts[0].item_name == "아티팩트"

    @pytest.mark.unit
    async def test_all_without_buff_skill(self):
        no_buff = {**SUMMARY, "skill": {"buff": None}}
        handler = route({section: object_response(no_buff) for section in ("equipment", "avatar", "creature")})

        async with make_client(handler) as client:
            result = await client.character().of_id(Server.CAIN, "abc123").buff().all()

        assert result.buff is None
        assert result.id == "abc123"

    @pytest.mark.unit
    async def test_all_fails_when_any_section_fails(self):
        handler = route(
            {
                "equipment": object_response(buff_payload(equipment=[EQUIPMENT])),
                "avatar": error_response(500, "DNF999", "system error"),
                "creature": object_response(buff_payload(creature=[CREATURE])),
            }
        )

        async with make_client(handler) as client:
            with pytest.raises(ServerError) as exc_info:
                await client.character().of_id(Server.CAIN, "abc123").buff().all()

        assert exc_info.value.api_message == "system error"

    @pytest.mark.unit
    async def test_all_stops_pending_sections_before_raising(self):
        finished = []
        cancelled = []

        async def respond(request: httpx.Request) -> httpx.Response:
            section = request.url.path.rsplit("/", 1)[-1]
            if section == "avatar":
                return error_response(500, "DNF999", "system error")
            try:
                await asyncio.sleep(0.2)
            except asyncio.CancelledError:
                cancelled.append(section)
                raise
            finished.append(section)
            return object_response(buff_payload())

        handler = RecordingHandler(respond)

        async with make_client(handler) as client:
            with pytest.raises(ServerError):
                await client.character().of_id(Server.CAIN, "abc123").buff().all()

            # nothing left running once the error reaches the caller
            assert sorted(cancelled) == ["creature", "equipment"]
            assert finished == []

        await asyncio.sleep(0.3)
        assert finished == []
