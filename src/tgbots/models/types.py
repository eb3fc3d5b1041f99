"""
Typed request objects: values that render themselves into request params.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class RequestType(BaseModel):
    """Base for every object that may appear as a request parameter value."""

    def to_request_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class MaskPosition(RequestType):
    """Where a mask sticker is placed on a face."""
    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float
    y_shift: float
    scale: float


class ForceReply(RequestType):
    force_reply: Literal[True] = True
    selective: bool = False


class InlineKeyboardButton(RequestType):
    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(RequestType):
    inline_keyboard: list[list[InlineKeyboardButton]] = Field(default_factory=list)


class KeyboardButton(RequestType):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class ReplyKeyboardMarkup(RequestType):
    keyboard: list[list[KeyboardButton]] = Field(default_factory=list)
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(RequestType):
    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None
