"""
Inbound updates: classify a raw update and wrap its payload.

An update carries exactly one of nine payload keys. They are tested in the
order of ``UPDATE_TYPES``; the first non-empty one decides the type. If the
API ever sent two, the earlier key in that order wins.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Optional, Union

from tgbots.errors import UnrecognizedEventError
from tgbots.models.base import RawView, is_empty
from tgbots.models.message import Message
from tgbots.models.queries import (
    CallbackQuery,
    ChosenInlineResult,
    InlineQuery,
    PreCheckoutQuery,
    ShippingQuery,
)

if TYPE_CHECKING:
    from tgbots.bot import Bot

logger = logging.getLogger(__name__)


class UpdateType(str, Enum):
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"


# Priority order matters: see module docstring.
UPDATE_TYPES: tuple[tuple[UpdateType, type[RawView]], ...] = (
    (UpdateType.MESSAGE, Message),
    (UpdateType.EDITED_MESSAGE, Message),
    (UpdateType.CHANNEL_POST, Message),
    (UpdateType.EDITED_CHANNEL_POST, Message),
    (UpdateType.INLINE_QUERY, InlineQuery),
    (UpdateType.CHOSEN_INLINE_RESULT, ChosenInlineResult),
    (UpdateType.CALLBACK_QUERY, CallbackQuery),
    (UpdateType.SHIPPING_QUERY, ShippingQuery),
    (UpdateType.PRE_CHECKOUT_QUERY, PreCheckoutQuery),
)

Item = Union[Message, InlineQuery, ChosenInlineResult, CallbackQuery, ShippingQuery, PreCheckoutQuery]


class Update:
    __slots__ = ("_id", "_type", "_payload", "_item")

    def __init__(self, id: Optional[int], type: UpdateType, payload: dict[str, Any], item: Item):
        self._id = id
        self._type = type
        self._payload = payload
        self._item = item

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def type(self) -> UpdateType:
        return self._type

    @property
    def payload(self) -> dict[str, Any]:
        return self._payload

    @property
    def item(self) -> Item:
        return self._item

    @property
    def message(self) -> Optional[Message]:
        """The wrapped message for any of the four message-carrying types."""
        return self.item if isinstance(self.item, Message) else None

    def __repr__(self) -> str:
        return f"Update(id={self.id!r}, type={self.type.value!r})"


def parse_update(envelope: dict[str, Any]) -> Update:
    update_id = envelope.get("update_id", envelope.get("id"))
    for update_type, view in UPDATE_TYPES:
        payload = envelope.get(update_type.value)
        if is_empty(payload):
            continue
        logger.debug("update %s classified as %s", update_id, update_type.value)
        return Update(update_id, update_type, payload, view(payload))  # type: ignore[arg-type]
    raise UnrecognizedEventError(list(envelope.keys()))


def iter_updates(
    bot: "Bot",
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    timeout: Optional[int] = None,
    allowed_updates: Optional[list[str]] = None,
) -> Iterator[Update]:
    """Yield updates from repeated getUpdates calls, confirming each batch.

    Without ``timeout`` the generator stops at the first empty batch. With a
    long-polling ``timeout`` it keeps polling until the caller stops.
    Unless ``allowed_updates`` is given, only the known update types are
    requested, so an unparseable update can never block the offset.
    """
    if allowed_updates is None:
        allowed_updates = [t.value for t in UpdateType]
    while True:
        response = bot.get_updates(
            offset=offset, limit=limit, timeout=timeout, allowed_updates=allowed_updates,
        ).send()
        batch = response.result or []
        logger.debug("getUpdates offset=%s returned %d updates", offset, len(batch))
        if not batch and not timeout:
            return
        for envelope in batch:
            update_id = envelope.get("update_id")
            if update_id is not None:
                offset = int(update_id) + 1
            yield parse_update(envelope)
