"""Chat member permission validation."""

import pytest

from tgbots.errors import InvalidArgumentError
from tgbots.permissions import (
    CAN_PIN_MESSAGES,
    CAN_SEND_MESSAGES,
    RESTRICT_PERMISSIONS,
    build_permissions,
)

ALLOWED = {"A", "B"}


def test_name_set_grants_all():
    assert build_permissions({"A"}, ALLOWED) == {"A": True}
    assert build_permissions(["A", "B"], ALLOWED) == {"A": True, "B": True}


def test_mapping_keeps_values():
    assert build_permissions({"A": True, "B": False}, ALLOWED) == {"A": True, "B": False}


def test_unknown_name_rejected():
    with pytest.raises(InvalidArgumentError) as exc_info:
        build_permissions({"C"}, ALLOWED)
    assert "C" in str(exc_info.value)
    assert exc_info.value.details == {"permission": "C"}


def test_non_bool_value_rejected():
    with pytest.raises(InvalidArgumentError):
        build_permissions({"A": 1}, ALLOWED)


def test_single_name_string():
    assert build_permissions("A", ALLOWED) == {"A": True}


def test_whitelists():
    assert CAN_SEND_MESSAGES in RESTRICT_PERMISSIONS
    assert CAN_PIN_MESSAGES not in RESTRICT_PERMISSIONS
