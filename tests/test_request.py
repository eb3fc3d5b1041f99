"""Request builder: capability gating and behavior setters."""

import json

import pytest

from tgbots import capabilities as caps
from tgbots.capabilities import Capability, CapabilitySet
from tgbots.errors import CapabilityError, InvalidArgumentError, TelegramBotsError
from tgbots.models.types import ForceReply, InlineKeyboardButton, InlineKeyboardMarkup
from tgbots.request import ParseMode, Request

SETTERS = {
    Capability.SET_PARSE_MODE: lambda r: r.set_parse_mode(ParseMode.HTML),
    Capability.DISABLE_NOTIFICATION: lambda r: r.set_notification(False),
    Capability.DISABLE_WEB_PAGE_PREVIEW: lambda r: r.set_web_page_preview(False),
    Capability.REPLY_TO_MESSAGE: lambda r: r.reply_to(42),
    Capability.ADD_REPLY_MARKUP: lambda r: r.add_force_reply(),
}

OPERATION_SETS = [
    ("sendMessage", caps.SEND_TEXT),
    ("forwardMessage", caps.NOTIFICATION_ONLY),
    ("sendPhoto", caps.SEND_MEDIA),
    ("sendLocation", caps.SEND_PLAIN),
    ("editMessageText", caps.EDIT_TEXT),
    ("stopMessageLiveLocation", caps.MARKUP_ONLY),
    ("getMe", caps.NONE),
]


@pytest.mark.parametrize("method,capability_set", OPERATION_SETS)
@pytest.mark.parametrize("capability", list(Capability))
def test_setter_allowed_iff_capability_present(method, capability_set, capability):
    request = Request(method, {"chat_id": 1}, capability_set)
    setter = SETTERS[capability]
    if capability in capability_set:
        assert setter(request) is request
    else:
        with pytest.raises(CapabilityError) as exc_info:
            setter(request)
        assert exc_info.value.capability == capability.name
        assert exc_info.value.method == method
        assert request.params == {"chat_id": 1}


def test_send_text_supports_all_five():
    assert set(caps.SEND_TEXT) == set(Capability)
    assert list(caps.NOTIFICATION_ONLY) == [Capability.DISABLE_NOTIFICATION]
    assert len(caps.NONE) == 0


def test_capability_set_is_value_like():
    a = CapabilitySet({Capability.REPLY_TO_MESSAGE, Capability.ADD_REPLY_MARKUP})
    b = CapabilitySet([Capability.ADD_REPLY_MARKUP, Capability.REPLY_TO_MESSAGE])
    assert a == b
    assert hash(a) == hash(b)


def test_setters_write_expected_params():
    request = (
        Request("sendMessage", {"chat_id": 1, "text": "hi"}, caps.SEND_TEXT)
        .set_parse_mode("markdown")
        .set_notification(False)
        .set_web_page_preview(False)
        .reply_to(7)
    )
    assert request.params == {
        "chat_id": 1,
        "text": "hi",
        "parse_mode": "markdown",
        "disable_notification": True,
        "disable_web_page_preview": True,
        "reply_to_message_id": 7,
    }

    request.set_notification(True)
    assert request.params["disable_notification"] is False


def test_unknown_parse_mode_leaves_params_unchanged():
    request = Request("sendMessage", {"chat_id": 1}, caps.SEND_TEXT).set_parse_mode("HTML")
    with pytest.raises(InvalidArgumentError):
        request.set_parse_mode("rst")
    assert request.params == {"chat_id": 1, "parse_mode": "HTML"}


def test_parse_mode_checked_against_capability_before_value():
    request = Request("forwardMessage", {}, caps.NOTIFICATION_ONLY)
    with pytest.raises(CapabilityError):
        request.set_parse_mode("rst")


def test_force_reply_and_markup():
    request = Request("sendMessage", {"chat_id": 1}, caps.SEND_TEXT).add_force_reply(selective=True)
    assert request.render()["reply_markup"] == {"force_reply": True, "selective": True}

    keyboard = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Yes", callback_data="y")]])
    request.set_reply_markup(keyboard)
    assert request.render()["reply_markup"] == {
        "inline_keyboard": [[{"text": "Yes", "callback_data": "y"}]],
    }


def test_force_reply_defaults_not_selective():
    request = Request("sendMessage", {}, caps.SEND_TEXT).add_force_reply()
    assert isinstance(request.params["reply_markup"], ForceReply)
    assert request.render() == {"reply_markup": {"force_reply": True, "selective": False}}


def test_render_drops_unset_params_and_str_adds_method():
    request = Request("sendPhoto", {"chat_id": 5, "photo": "abc", "caption": None}, caps.SEND_MEDIA)
    assert request.render() == {"chat_id": 5, "photo": "abc"}
    assert json.loads(str(request)) == {"chat_id": 5, "photo": "abc", "method": "sendPhoto"}


def test_builder_copies_base_params():
    base = {"chat_id": 1}
    request = Request("sendMessage", base, caps.SEND_TEXT).reply_to(3)
    assert base == {"chat_id": 1}
    assert request.params["reply_to_message_id"] == 3


def test_send_without_transport_fails():
    with pytest.raises(TelegramBotsError) as exc_info:
        Request("getMe").send()
    assert exc_info.value.code == "no_transport"
