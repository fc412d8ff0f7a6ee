"""Character and item images from the image host."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from df_client.errors import InvalidQueryParameter
from df_client.models import Server
from df_client.query import SearchParameter

if TYPE_CHECKING:
    from df_client.client import DfClient

IMAGE_BASE_URL = "https://img-api.neople.co.kr/df"


@dataclass
class ZoomParameter(SearchParameter):
    FIELDS: ClassVar[tuple[str, ...]] = ("zoom",)

    zoom: int | None = None


class ImageHandler:
    def __init__(self, client: "DfClient"):
        self._client = client

    async def character(self, server: Server, character_id: str, zoom: int = 1) -> bytes:
        """Fetch a character's rendered image.

        Raises:
            InvalidQueryParameter: If ``zoom`` is not 1, 2 or 3.
        """
        url = f"{IMAGE_BASE_URL}/servers/{server}/characters/{character_id}"
        if zoom not in (1, 2, 3):
            raise InvalidQueryParameter(url, f"`zoom` must be 1, 2, or 3. (current: `{zoom}`)")
        response = await self._client.get(url, ZoomParameter(zoom=zoom))
        return response.content

    async def item(self, item_id: str) -> bytes:
        response = await self._client.get(f"{IMAGE_BASE_URL}/items/{item_id}")
        return response.content
