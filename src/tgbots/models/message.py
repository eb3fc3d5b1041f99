"""
Message view, used for messages, edited messages and channel posts.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Optional, Union

from tgbots.models.base import RawView
from tgbots.models.chat import Chat, User


class Message(RawView):
    @property
    def id(self) -> Optional[int]:
        return self._get("message_id")

    @property
    def text(self) -> Optional[str]:
        return self._get("text")

    @property
    def caption(self) -> Optional[str]:
        return self._get("caption")

    @property
    def entities(self) -> Optional[list[dict[str, Any]]]:
        return self._get("entities")

    @property
    def media_group_id(self) -> Optional[str]:
        return self._get("media_group_id")

    @property
    def author_signature(self) -> Optional[str]:
        return self._get("author_signature")

    @cached_property
    def from_user(self) -> Optional[User]:
        data = self._get("from")
        return User(data) if data else None

    @cached_property
    def chat(self) -> Optional[Chat]:
        data = self._get("chat")
        return Chat(data) if data else None

    @cached_property
    def forward_from(self) -> Optional[User]:
        data = self._get("forward_from")
        return User(data) if data else None

    @cached_property
    def forward_from_chat(self) -> Optional[Chat]:
        data = self._get("forward_from_chat")
        return Chat(data) if data else None

    @cached_property
    def reply_to_message(self) -> Optional[Message]:
        data = self._get("reply_to_message")
        return Message(data) if data else None

    @property
    def forward_from_message_id(self) -> Optional[int]:
        value = self._get("forward_from_message_id")
        return int(value) if value else None

    @property
    def forward_signature(self) -> Optional[str]:
        return self._get("forward_signature")

    def date(self, fmt: Optional[str] = None) -> Union[int, str, None]:
        return self._timestamp("date", fmt)

    def forward_date(self, fmt: Optional[str] = None) -> Union[int, str, None]:
        return self._timestamp("forward_date", fmt)

    def edit_date(self, fmt: Optional[str] = None) -> Union[int, str, None]:
        return self._timestamp("edit_date", fmt)
