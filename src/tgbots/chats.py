"""
Chat administration API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from tgbots import capabilities as caps
from tgbots.permissions import PROMOTE_PERMISSIONS, RESTRICT_PERMISSIONS, Permissions, build_permissions
from tgbots.request import Request

if TYPE_CHECKING:
    from tgbots.bot import Bot

ChatId = Union[int, str]


class ChatsAPI:
    def __init__(self, bot: Bot):
        self._bot = bot

    def get(self, chat_id: ChatId) -> Request:
        return self._bot.request("getChat", {"chat_id": chat_id})

    def get_administrators(self, chat_id: ChatId) -> Request:
        return self._bot.request("getChatAdministrators", {"chat_id": chat_id})

    def get_members_count(self, chat_id: ChatId) -> Request:
        return self._bot.request("getChatMembersCount", {"chat_id": chat_id})

    def get_member(self, chat_id: ChatId, user_id: int) -> Request:
        return self._bot.request("getChatMember", {"chat_id": chat_id, "user_id": user_id})

    def kick_member(self, chat_id: ChatId, user_id: int, until_date: Optional[int] = None) -> Request:
        return self._bot.request("kickChatMember", {
            "chat_id": chat_id,
            "user_id": user_id,
            "until_date": until_date,
        })

    def unban_member(self, chat_id: ChatId, user_id: int) -> Request:
        return self._bot.request("unbanChatMember", {"chat_id": chat_id, "user_id": user_id})

    def restrict_member(
        self,
        chat_id: ChatId,
        user_id: int,
        until_date: Optional[int] = None,
        permissions: Optional[Permissions] = None,
    ) -> Request:
        """Restrict a supergroup member. ``permissions`` may only use RESTRICT_PERMISSIONS."""
        params = {"chat_id": chat_id, "user_id": user_id, "until_date": until_date}
        if permissions is not None:
            params.update(build_permissions(permissions, RESTRICT_PERMISSIONS))
        return self._bot.request("restrictChatMember", params)

    def promote_member(
        self, chat_id: ChatId, user_id: int, permissions: Optional[Permissions] = None,
    ) -> Request:
        """Promote or demote a member. ``permissions`` may only use PROMOTE_PERMISSIONS."""
        params = {"chat_id": chat_id, "user_id": user_id}
        if permissions is not None:
            params.update(build_permissions(permissions, PROMOTE_PERMISSIONS))
        return self._bot.request("promoteChatMember", params)

    def export_invite_link(self, chat_id: ChatId) -> Request:
        return self._bot.request("exportChatInviteLink", {"chat_id": chat_id})

    def set_photo(self, chat_id: ChatId, photo: str) -> Request:
        return self._bot.request("setChatPhoto", {"chat_id": chat_id, "photo": photo})

    def delete_photo(self, chat_id: ChatId) -> Request:
        return self._bot.request("deleteChatPhoto", {"chat_id": chat_id})

    def set_title(self, chat_id: ChatId, title: str) -> Request:
        return self._bot.request("setChatTitle", {"chat_id": chat_id, "title": title})

    def set_description(self, chat_id: ChatId, description: Optional[str] = None) -> Request:
        return self._bot.request("setChatDescription", {"chat_id": chat_id, "description": description})

    def pin_message(self, chat_id: ChatId, message_id: int) -> Request:
        return self._bot.request("pinChatMessage", {
            "chat_id": chat_id,
            "message_id": message_id,
        }, caps.NOTIFICATION_ONLY)

    def unpin_message(self, chat_id: ChatId) -> Request:
        return self._bot.request("unpinChatMessage", {"chat_id": chat_id})

    def leave(self, chat_id: ChatId) -> Request:
        return self._bot.request("leaveChat", {"chat_id": chat_id})

    def set_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> Request:
        return self._bot.request("setChatStickerSet", {
            "chat_id": chat_id,
            "sticker_set_name": sticker_set_name,
        })

    def delete_sticker_set(self, chat_id: ChatId) -> Request:
        return self._bot.request("deleteChatStickerSet", {"chat_id": chat_id})
