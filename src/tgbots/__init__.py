"""
tgbots: Telegram Bot API client for Python.

Capability-checked request building over a small HTTP client,
and typed views over incoming updates.
"""

from tgbots.bot import Bot, escape_html
from tgbots.capabilities import Capability, CapabilitySet
from tgbots.errors import (
    TelegramBotsError,
    CapabilityError,
    InvalidArgumentError,
    SerializationError,
    TransportError,
    ApiError,
    UnrecognizedEventError,
)
from tgbots.request import ParseMode, Request
from tgbots.updates import Update, UpdateType, iter_updates, parse_update

__version__ = "0.1.0"
__all__ = [
    "Bot",
    "escape_html",
    "Capability",
    "CapabilitySet",
    "ParseMode",
    "Request",
    "Update",
    "UpdateType",
    "iter_updates",
    "parse_update",
    "TelegramBotsError",
    "CapabilityError",
    "InvalidArgumentError",
    "SerializationError",
    "TransportError",
    "ApiError",
    "UnrecognizedEventError",
]
