"""
Chat member permission flags for restrictChatMember / promoteChatMember.
"""

from collections.abc import Mapping
from typing import Iterable, Union

from tgbots.errors import InvalidArgumentError

CAN_ADD_WEB_PAGE_PREVIEWS = "can_add_web_page_previews"
CAN_CHANGE_INFO = "can_change_info"
CAN_DELETE_MESSAGES = "can_delete_messages"
CAN_EDIT_MESSAGES = "can_edit_messages"
CAN_INVITE_USERS = "can_invite_users"
CAN_PIN_MESSAGES = "can_pin_messages"
CAN_POST_MESSAGES = "can_post_messages"
CAN_PROMOTE_MEMBERS = "can_promote_members"
CAN_RESTRICT_MEMBERS = "can_restrict_members"
CAN_SEND_MEDIA_MESSAGES = "can_send_media_messages"
CAN_SEND_MESSAGES = "can_send_messages"
CAN_SEND_OTHER_MESSAGES = "can_send_other_messages"

RESTRICT_PERMISSIONS = frozenset({
    CAN_SEND_MESSAGES,
    CAN_SEND_MEDIA_MESSAGES,
    CAN_SEND_OTHER_MESSAGES,
    CAN_ADD_WEB_PAGE_PREVIEWS,
})

PROMOTE_PERMISSIONS = frozenset({
    CAN_CHANGE_INFO,
    CAN_POST_MESSAGES,
    CAN_EDIT_MESSAGES,
    CAN_DELETE_MESSAGES,
    CAN_INVITE_USERS,
    CAN_RESTRICT_MEMBERS,
    CAN_PIN_MESSAGES,
    CAN_PROMOTE_MEMBERS,
})

Permissions = Union[Iterable[str], Mapping[str, bool]]


def build_permissions(permissions: Permissions, allowed: Iterable[str]) -> dict[str, bool]:
    """Validate permission flags against ``allowed``.

    A plain collection of names grants each of them; a mapping gives each
    flag an explicit value. Unknown names and non-bool values are rejected.
    """
    allowed = frozenset(allowed)
    if isinstance(permissions, str):
        permissions = [permissions]
    if isinstance(permissions, Mapping):
        items = list(permissions.items())
    else:
        items = [(name, True) for name in permissions]

    result: dict[str, bool] = {}
    for name, value in items:
        if name not in allowed:
            raise InvalidArgumentError(
                f'Permission "{name}" is not supported by this method', {"permission": name},
            )
        if not isinstance(value, bool):
            raise InvalidArgumentError(
                f'Permission value "{value}" for "{name}" is not boolean', {"permission": name},
            )
        result[name] = value
    return result
