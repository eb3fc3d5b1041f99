"""
Optional request behaviors and the per-operation capability sets.
"""

from enum import Enum
from typing import Iterable, Iterator


class Capability(str, Enum):
    DISABLE_NOTIFICATION = "disable_notification"
    REPLY_TO_MESSAGE = "reply_to_message"
    ADD_REPLY_MARKUP = "add_reply_markup"
    DISABLE_WEB_PAGE_PREVIEW = "disable_web_page_preview"
    SET_PARSE_MODE = "set_parse_mode"


class CapabilitySet:
    """Immutable set of capabilities an operation supports."""

    __slots__ = ("_members",)

    def __init__(self, capabilities: Iterable[Capability] = ()):
        self._members = frozenset(Capability(c) for c in capabilities)

    def __contains__(self, capability: object) -> bool:
        return capability in self._members

    def __iter__(self) -> Iterator[Capability]:
        return iter(sorted(self._members, key=lambda c: c.value))

    def __len__(self) -> int:
        return len(self._members)

    def __or__(self, other: "CapabilitySet") -> "CapabilitySet":
        return CapabilitySet(self._members | other._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilitySet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"CapabilitySet({[c.value for c in self]!r})"


NONE = CapabilitySet()
NOTIFICATION_ONLY = CapabilitySet({Capability.DISABLE_NOTIFICATION})
MARKUP_ONLY = CapabilitySet({Capability.ADD_REPLY_MARKUP})

# location, venue, contact, sticker, video note
SEND_PLAIN = CapabilitySet({
    Capability.DISABLE_NOTIFICATION,
    Capability.REPLY_TO_MESSAGE,
    Capability.ADD_REPLY_MARKUP,
})

# photo, audio, document, video, animation, voice
SEND_MEDIA = SEND_PLAIN | CapabilitySet({Capability.SET_PARSE_MODE})

SEND_TEXT = SEND_MEDIA | CapabilitySet({Capability.DISABLE_WEB_PAGE_PREVIEW})

EDIT_TEXT = CapabilitySet({
    Capability.SET_PARSE_MODE,
    Capability.REPLY_TO_MESSAGE,
    Capability.ADD_REPLY_MARKUP,
})
