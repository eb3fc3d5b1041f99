"""
Request builder: one outbound Bot API call.

A request is bound to the capability set of its operation when it is
created. Each behavior setter checks its capability first and only then
touches the parameters, so a rejected call leaves the request unchanged.
"""

import json
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from tgbots.capabilities import Capability, CapabilitySet
from tgbots.errors import CapabilityError, InvalidArgumentError, TelegramBotsError
from tgbots.models.response import Response
from tgbots.models.types import ForceReply, RequestType
from tgbots.params import render_params

if TYPE_CHECKING:
    from tgbots.transport.http import HttpClient


class ParseMode(str, Enum):
    HTML = "HTML"
    MARKDOWN = "markdown"


def check_parse_mode(parse_mode: Union[str, ParseMode]) -> ParseMode:
    try:
        return ParseMode(parse_mode)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown parse mode: {parse_mode}", {"parse_mode": str(parse_mode)},
        ) from None


class Request:
    def __init__(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        capabilities: CapabilitySet = CapabilitySet(),
        transport: Optional["HttpClient"] = None,
    ):
        self._method = method
        self._capabilities = capabilities
        self._transport = transport
        self.params: dict[str, Any] = dict(params or {})

    @property
    def method(self) -> str:
        return self._method

    @property
    def capabilities(self) -> CapabilitySet:
        return self._capabilities

    def can(self, capability: Capability) -> bool:
        return capability in self._capabilities

    def _require(self, capability: Capability) -> None:
        if capability not in self._capabilities:
            raise CapabilityError(capability.name, self._method)

    def set_parse_mode(self, parse_mode: Union[str, ParseMode]) -> "Request":
        self._require(Capability.SET_PARSE_MODE)
        self.params["parse_mode"] = check_parse_mode(parse_mode).value
        return self

    def set_notification(self, enable: bool) -> "Request":
        self._require(Capability.DISABLE_NOTIFICATION)
        self.params["disable_notification"] = not enable
        return self

    def set_web_page_preview(self, enable: bool) -> "Request":
        self._require(Capability.DISABLE_WEB_PAGE_PREVIEW)
        self.params["disable_web_page_preview"] = not enable
        return self

    def reply_to(self, message_id: int) -> "Request":
        self._require(Capability.REPLY_TO_MESSAGE)
        self.params["reply_to_message_id"] = message_id
        return self

    def set_reply_markup(self, markup: Union[RequestType, dict[str, Any]]) -> "Request":
        self._require(Capability.ADD_REPLY_MARKUP)
        self.params["reply_markup"] = markup
        return self

    def add_force_reply(self, selective: bool = False) -> "Request":
        """Ask clients to show a reply interface to the user."""
        self._require(Capability.ADD_REPLY_MARKUP)
        self.params["reply_markup"] = ForceReply(selective=selective)
        return self

    def render(self) -> dict[str, Any]:
        """Wire-ready parameters with unset values removed."""
        return render_params(self.params)

    def send(self) -> Response:
        if self._transport is None:
            raise TelegramBotsError("no_transport", f"Request {self._method} has no transport to send with")
        return self._transport.post(self._method, self.render())

    def __str__(self) -> str:
        return json.dumps({**self.render(), "method": self._method})

    def __repr__(self) -> str:
        return f"Request(method={self._method!r}, params={self.params!r})"
