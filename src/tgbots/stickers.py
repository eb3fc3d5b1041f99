"""
Sticker set API.

Sticker files are referenced by file_id or URL; uploads are not handled here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from tgbots.models.types import MaskPosition
from tgbots.request import Request

if TYPE_CHECKING:
    from tgbots.bot import Bot


class StickersAPI:
    def __init__(self, bot: Bot):
        self._bot = bot

    def get_set(self, name: str) -> Request:
        return self._bot.request("getStickerSet", {"name": name})

    def upload_file(self, user_id: int, png_sticker: str) -> Request:
        return self._bot.request("uploadStickerFile", {"user_id": user_id, "png_sticker": png_sticker})

    def create_set(
        self,
        user_id: int,
        name: str,
        title: str,
        png_sticker: str,
        emojis: str,
        contains_masks: Optional[bool] = None,
        mask_position: Optional[MaskPosition] = None,
    ) -> Request:
        return self._bot.request("createNewStickerSet", {
            "user_id": user_id,
            "name": name,
            "title": title,
            "png_sticker": png_sticker,
            "emojis": emojis,
            "contains_masks": contains_masks,
            "mask_position": mask_position,
        })

    def add_to_set(
        self,
        user_id: int,
        name: str,
        png_sticker: str,
        emojis: str,
        mask_position: Optional[MaskPosition] = None,
    ) -> Request:
        return self._bot.request("addStickerToSet", {
            "user_id": user_id,
            "name": name,
            "png_sticker": png_sticker,
            "emojis": emojis,
            "mask_position": mask_position,
        })

    def set_position_in_set(self, sticker: str, position: int) -> Request:
        return self._bot.request("setStickerPositionInSet", {"sticker": sticker, "position": position})

    def delete_from_set(self, sticker: str) -> Request:
        return self._bot.request("deleteStickerFromSet", {"sticker": sticker})
