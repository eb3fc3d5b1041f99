"""
tgbots error types.

Pre-flight errors (capability, argument, serialization) are raised before
any network activity. Transport and API errors come from the HTTP client.
"""

from typing import Any, Optional


class TelegramBotsError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class CapabilityError(TelegramBotsError):
    """An operation was used with a behavior it does not support."""

    def __init__(self, capability: str, method: str):
        super().__init__(
            "capability_error",
            f"Method {method} requires capability {capability}",
            {"capability": capability, "method": method},
        )
        self.capability = capability
        self.method = method


class InvalidArgumentError(TelegramBotsError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_argument", message, details)


class SerializationError(TelegramBotsError):
    def __init__(self, type_name: str):
        super().__init__(
            "serialization_error",
            f"Value of type {type_name} cannot be rendered into request parameters",
            {"type": type_name},
        )
        self.type_name = type_name


class TransportError(TelegramBotsError):
    """Connection failure, timeout, non-200 status or unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("transport_error", message, {"status_code": status_code})
        self.status_code = status_code


class ApiError(TelegramBotsError):
    """The Bot API answered with ``ok: false``."""

    def __init__(self, description: str, error_code: Optional[int] = None):
        super().__init__("api_error", description, {"error_code": error_code})
        self.description = description
        self.error_code = error_code


class UnrecognizedEventError(TelegramBotsError):
    def __init__(self, keys: list[str]):
        super().__init__(
            "unrecognized_event",
            f"Update type not found in keys: {', '.join(keys)}",
            {"keys": keys},
        )
        self.keys = keys
