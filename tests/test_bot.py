"""Bot convenience methods, chats and stickers APIs."""

import json
from typing import Any

import httpx
import pytest

from tgbots import capabilities as caps
from tgbots.bot import Bot, escape_html
from tgbots.capabilities import Capability
from tgbots.errors import ApiError, CapabilityError, InvalidArgumentError
from tgbots.models.types import MaskPosition
from tgbots.permissions import CAN_PIN_MESSAGES, CAN_SEND_MESSAGES

TOKEN = "123456:ABC-DEF"


@pytest.fixture
def bot():
    bot = Bot(TOKEN, username="demo_bot")
    yield bot
    bot.close()


def test_identity(bot):
    assert bot.id == 123456
    assert bot.token == TOKEN
    assert bot.username == "demo_bot"


def test_send_message_gets_default_parse_mode(bot):
    request = bot.send_message(10, "<b>hi</b>")
    assert request.method == "sendMessage"
    assert request.capabilities == caps.SEND_TEXT
    assert request.render() == {"chat_id": 10, "text": "<b>hi</b>", "parse_mode": "HTML"}


def test_default_parse_mode_only_where_supported(bot):
    bot.set_default_parse_mode("markdown")
    assert bot.send_photo(1, "file-id").params["parse_mode"] == "markdown"
    assert bot.edit_message_caption(1, "c", message_id=2).params["parse_mode"] == "markdown"
    assert "parse_mode" not in bot.send_location(1, 1.0, 2.0).params
    assert "parse_mode" not in bot.forward_message(1, 2, 3).params


def test_explicit_parse_mode_is_not_overwritten(bot):
    request = bot.request("sendMessage", {"chat_id": 1, "text": "*hi*", "parse_mode": "markdown"}, caps.SEND_TEXT)
    assert request.params["parse_mode"] == "markdown"
    assert bot.request("sendMessage", {"chat_id": 1, "text": "x"}, caps.SEND_TEXT).params["parse_mode"] == "HTML"


def test_invalid_default_parse_mode():
    with pytest.raises(InvalidArgumentError):
        Bot(TOKEN, default_parse_mode="bbcode")


def test_forward_message_only_allows_notification(bot):
    request = bot.forward_message(1, 2, 3).set_notification(False)
    assert request.render()["disable_notification"] is True
    with pytest.raises(CapabilityError):
        request.reply_to(4)
    with pytest.raises(CapabilityError):
        request.set_web_page_preview(False)


@pytest.mark.parametrize("factory,expected", [
    (lambda b: b.send_audio(1, "a"), caps.SEND_MEDIA),
    (lambda b: b.send_document(1, "d"), caps.SEND_MEDIA),
    (lambda b: b.send_video(1, "v"), caps.SEND_MEDIA),
    (lambda b: b.send_animation(1, "g"), caps.SEND_MEDIA),
    (lambda b: b.send_voice(1, "o"), caps.SEND_MEDIA),
    (lambda b: b.send_video_note(1, "n"), caps.SEND_PLAIN),
    (lambda b: b.send_venue(1, 1.0, 2.0, "t", "a"), caps.SEND_PLAIN),
    (lambda b: b.send_contact(1, "+1", "Ann"), caps.SEND_PLAIN),
    (lambda b: b.send_sticker(1, "s"), caps.SEND_PLAIN),
    (lambda b: b.send_game(1, "g"), caps.SEND_PLAIN),
    (lambda b: b.edit_message_text(1, "t", message_id=2), caps.EDIT_TEXT),
    (lambda b: b.edit_message_reply_markup(1, message_id=2), caps.MARKUP_ONLY),
    (lambda b: b.edit_message_live_location(1, 1.0, 2.0, message_id=2), caps.MARKUP_ONLY),
    (lambda b: b.stop_message_live_location(None, inline_message_id="i"), caps.MARKUP_ONLY),
    (lambda b: b.chats.pin_message(1, 2), caps.NOTIFICATION_ONLY),
    (lambda b: b.chats.leave(1), caps.NONE),
    (lambda b: b.send_chat_action(1, "typing"), caps.NONE),
    (lambda b: b.get_me(), caps.NONE),
])
def test_operation_capabilities(bot, factory, expected):
    assert factory(bot).capabilities == expected


@pytest.mark.parametrize("factory", [
    lambda b: b.edit_message_text(1, "t"),
    lambda b: b.edit_message_caption(1, "c"),
    lambda b: b.edit_message_reply_markup(1),
    lambda b: b.edit_message_live_location(1, 1.0, 2.0),
    lambda b: b.stop_message_live_location(1),
])
def test_edit_requires_a_target(bot, factory):
    with pytest.raises(InvalidArgumentError):
        factory(bot)


def test_optional_params_dropped(bot):
    request = bot.send_video(1, "v", duration=3)
    assert request.render() == {"chat_id": 1, "video": "v", "duration": 3, "parse_mode": "HTML"}


def test_restrict_and_promote_members(bot):
    request = bot.chats.restrict_member(1, 2, until_date=99, permissions=[CAN_SEND_MESSAGES])
    assert request.render() == {"chat_id": 1, "user_id": 2, "until_date": 99, CAN_SEND_MESSAGES: True}

    request = bot.chats.promote_member(1, 2, {CAN_PIN_MESSAGES: False})
    assert request.render() == {"chat_id": 1, "user_id": 2, CAN_PIN_MESSAGES: False}

    with pytest.raises(InvalidArgumentError):
        bot.chats.restrict_member(1, 2, permissions=[CAN_PIN_MESSAGES])
    with pytest.raises(InvalidArgumentError):
        bot.chats.promote_member(1, 2, {CAN_PIN_MESSAGES: "yes"})


def test_create_sticker_set_renders_mask_position(bot):
    mask = MaskPosition(point="mouth", x_shift=0.0, y_shift=0.5, scale=1.0)
    request = bot.stickers.create_set(1, "pack_by_demo_bot", "Pack", "file-id", "😀", contains_masks=True, mask_position=mask)
    assert request.method == "createNewStickerSet"
    assert request.render()["mask_position"] == {"point": "mouth", "x_shift": 0.0, "y_shift": 0.5, "scale": 1.0}


def test_file_url(bot):
    assert bot.file_url("documents/file_3.pdf") == f"https://api.telegram.org/file/bot{TOKEN}/documents/file_3.pdf"


def test_escape_html():
    assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"


def test_send_goes_through_transport():
    observed: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        observed["path"] = request.url.path
        observed["body"] = json.loads(request.content)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 5}})

    with Bot(TOKEN, transport=httpx.MockTransport(handler)) as bot:
        response = bot.send_message("@channel", "hi").set_notification(False).reply_to(4).send()

    assert observed["path"] == f"/bot{TOKEN}/sendMessage"
    assert observed["body"] == {
        "chat_id": "@channel",
        "text": "hi",
        "parse_mode": "HTML",
        "disable_notification": True,
        "reply_to_message_id": 4,
    }
    assert response.result == {"message_id": 5}


def test_capability_error_raised_before_network():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"ok": True, "result": True})

    with Bot(TOKEN, transport=httpx.MockTransport(handler)) as bot:
        with pytest.raises(CapabilityError) as exc_info:
            bot.chats.leave(1).set_notification(False).send()
    assert exc_info.value.capability == Capability.DISABLE_NOTIFICATION.name
    assert calls == []


def test_api_error_surfaces():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"ok": False, "error_code": 403, "description": "Forbidden: bot was blocked by the user"})

    with Bot(TOKEN, transport=httpx.MockTransport(handler)) as failing:
        with pytest.raises(ApiError) as exc_info:
            failing.send_message(1, "hi").send()
    assert exc_info.value.error_code == 403
