"""
Read-only views over raw Bot API objects.

A view keeps the decoded JSON object it was built from and never mutates
it. Nested views are built on first access and cached on the instance.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Union


def is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (dict, list)) and not value)


class RawView:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def _get(self, key: str) -> Any:
        value = self._data.get(key)
        return None if is_empty(value) else value

    def _timestamp(self, key: str, fmt: Optional[str] = None) -> Union[int, str, None]:
        """Unix time stored under ``key``; ``fmt`` renders it with strftime (UTC)."""
        value = self._data.get(key)
        if not value:
            return None
        if fmt:
            return datetime.fromtimestamp(int(value), tz=timezone.utc).strftime(fmt)
        return int(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
