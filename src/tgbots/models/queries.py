"""
Inline, callback and payment query views.
"""

from functools import cached_property
from typing import Any, Optional

from tgbots.models.base import RawView
from tgbots.models.chat import User
from tgbots.models.message import Message


class _SenderView(RawView):
    @property
    def id(self) -> Optional[str]:
        return self._get("id")

    @cached_property
    def from_user(self) -> Optional[User]:
        data = self._get("from")
        return User(data) if data else None


class InlineQuery(_SenderView):
    @property
    def query(self) -> str:
        return self._data.get("query") or ""

    @property
    def offset(self) -> str:
        return self._data.get("offset") or ""

    @property
    def location(self) -> Optional[dict[str, Any]]:
        return self._get("location")


class ChosenInlineResult(_SenderView):
    @property
    def id(self) -> Optional[str]:
        return self._get("result_id")

    @property
    def query(self) -> str:
        return self._data.get("query") or ""

    @property
    def inline_message_id(self) -> Optional[str]:
        return self._get("inline_message_id")

    @property
    def location(self) -> Optional[dict[str, Any]]:
        return self._get("location")


class CallbackQuery(_SenderView):
    @cached_property
    def message(self) -> Optional[Message]:
        data = self._get("message")
        return Message(data) if data else None

    @property
    def inline_message_id(self) -> Optional[str]:
        return self._get("inline_message_id")

    @property
    def chat_instance(self) -> Optional[str]:
        return self._get("chat_instance")

    @property
    def data(self) -> Optional[str]:
        return self._get("data")

    @property
    def game_short_name(self) -> Optional[str]:
        return self._get("game_short_name")


class ShippingQuery(_SenderView):
    @property
    def invoice_payload(self) -> Optional[str]:
        return self._get("invoice_payload")

    @property
    def shipping_address(self) -> Optional[dict[str, Any]]:
        return self._get("shipping_address")


class PreCheckoutQuery(_SenderView):
    @property
    def currency(self) -> Optional[str]:
        return self._get("currency")

    @property
    def total_amount(self) -> Optional[int]:
        return self._get("total_amount")

    @property
    def invoice_payload(self) -> Optional[str]:
        return self._get("invoice_payload")

    @property
    def shipping_option_id(self) -> Optional[str]:
        return self._get("shipping_option_id")

    @property
    def order_info(self) -> Optional[dict[str, Any]]:
        return self._get("order_info")
