"""
User and Chat views.
"""

from typing import Optional

from tgbots.models.base import RawView


class User(RawView):
    @property
    def id(self) -> Optional[int]:
        return self._get("id")

    @property
    def is_bot(self) -> bool:
        return bool(self._data.get("is_bot", False))

    @property
    def first_name(self) -> Optional[str]:
        return self._get("first_name")

    @property
    def last_name(self) -> Optional[str]:
        return self._get("last_name")

    @property
    def username(self) -> Optional[str]:
        return self._get("username")

    @property
    def language_code(self) -> Optional[str]:
        return self._get("language_code")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class Chat(RawView):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"

    @property
    def id(self) -> Optional[int]:
        return self._get("id")

    @property
    def type(self) -> Optional[str]:
        return self._get("type")

    @property
    def title(self) -> Optional[str]:
        return self._get("title")

    @property
    def username(self) -> Optional[str]:
        return self._get("username")

    @property
    def first_name(self) -> Optional[str]:
        return self._get("first_name")

    @property
    def last_name(self) -> Optional[str]:
        return self._get("last_name")

    @property
    def is_private(self) -> bool:
        return self.type == self.PRIVATE
