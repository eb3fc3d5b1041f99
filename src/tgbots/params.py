"""
Rendering of request parameters into a JSON-ready mapping.

``None`` means "not set" and is dropped at every depth. Typed request
objects are rendered through ``to_request_dict()`` and the result is
rendered again with the same rules.
"""

from typing import Any, Mapping

from tgbots.errors import SerializationError
from tgbots.models.types import RequestType

SCALAR_TYPES = (str, int, float, bool)


def render_params(params: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        result[key] = render_value(value)
    return result


def render_value(value: Any) -> Any:
    if isinstance(value, SCALAR_TYPES):
        return value
    if isinstance(value, RequestType):
        return render_params(value.to_request_dict())
    if isinstance(value, Mapping):
        return render_params(value)
    if isinstance(value, (list, tuple)):
        return [render_value(item) for item in value if item is not None]
    raise SerializationError(type(value).__name__)
