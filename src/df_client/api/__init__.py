"""Resource handlers built from a ``DfClient``."""

from df_client.api.auction import AuctionHandler
from df_client.api.character import CharacterBuffHandler, CharacterHandler, SpecificCharacterHandler
from df_client.api.image import IMAGE_BASE_URL, ImageHandler
from df_client.api.item import ItemHandler

__all__ = [
    "IMAGE_BASE_URL",
    "AuctionHandler",
    "CharacterBuffHandler",
    "CharacterHandler",
    "ImageHandler",
    "ItemHandler",
    "SpecificCharacterHandler",
]
