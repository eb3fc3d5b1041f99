"""
Bot: Telegram Bot API client.

Every API method returns an unsent ``Request`` bound to the method's
capability set. Adjust it with the behavior setters, then call ``send()``::

    bot = Bot(token)
    bot.send_message(chat_id, "<b>hi</b>").set_notification(False).send()
"""

from typing import Any, Optional, Union

import httpx

from tgbots import capabilities as caps
from tgbots.capabilities import Capability, CapabilitySet
from tgbots.chats import ChatsAPI
from tgbots.config import DEFAULT_BASE_URL
from tgbots.errors import InvalidArgumentError
from tgbots.request import ParseMode, Request, check_parse_mode
from tgbots.stickers import StickersAPI
from tgbots.transport.http import HttpClient

ChatId = Union[int, str]

ACTION_TYPING = "typing"
ACTION_UPLOADING_PHOTO = "upload_photo"
ACTION_RECORDING_VIDEO = "record_video"
ACTION_UPLOADING_VIDEO = "upload_video"
ACTION_RECORDING_AUDIO = "record_audio"
ACTION_UPLOADING_AUDIO = "upload_audio"
ACTION_UPLOADING_DOCUMENT = "upload_document"
ACTION_FINDING_LOCATION = "find_location"
ACTION_RECORDING_VIDEO_NOTE = "record_video_note"
ACTION_UPLOADING_VIDEO_NOTE = "upload_video_note"


def escape_html(text: str) -> str:
    """Escape text for messages sent with the HTML parse mode."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _require_target(message_id: Optional[int], inline_message_id: Optional[str]) -> None:
    if message_id is None and inline_message_id is None:
        raise InvalidArgumentError("message_id or inline_message_id must be set")


class Bot:
    def __init__(
        self,
        token: str,
        username: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        default_parse_mode: Union[str, ParseMode] = ParseMode.HTML,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._token = token
        self._username = username
        self._default_parse_mode = check_parse_mode(default_parse_mode)

        self.http = HttpClient(token, base_url=base_url, transport=transport)
        self.chats = ChatsAPI(self)
        self.stickers = StickersAPI(self)

    @property
    def id(self) -> int:
        """Numeric bot id, the part of the token before the colon."""
        return int(self._token.split(":", 1)[0])

    @property
    def token(self) -> str:
        return self._token

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def default_parse_mode(self) -> ParseMode:
        return self._default_parse_mode

    def set_default_parse_mode(self, parse_mode: Union[str, ParseMode]) -> "Bot":
        self._default_parse_mode = check_parse_mode(parse_mode)
        return self

    def request(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        capabilities: CapabilitySet = caps.NONE,
    ) -> Request:
        """Build a request; operations that take a parse mode get the default one
        unless ``params`` already names one."""
        request = Request(method, params, capabilities, transport=self.http)
        if Capability.SET_PARSE_MODE in capabilities and request.params.get("parse_mode") is None:
            request.set_parse_mode(self._default_parse_mode)
        return request

    def file_url(self, file_path: str) -> str:
        return self.http.file_url(file_path)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Bot":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    # -- updates & webhook ---------------------------------------------------

    def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
        allowed_updates: Optional[list[str]] = None,
    ) -> Request:
        return self.request("getUpdates", {
            "offset": offset,
            "limit": limit,
            "timeout": timeout,
            "allowed_updates": allowed_updates,
        })

    def get_me(self) -> Request:
        return self.request("getMe")

    def set_webhook(
        self,
        url: str,
        certificate: Optional[str] = None,
        max_connections: Optional[int] = None,
        allowed_updates: Optional[list[str]] = None,
    ) -> Request:
        return self.request("setWebhook", {
            "url": url,
            "certificate": certificate,
            "max_connections": max_connections,
            "allowed_updates": allowed_updates,
        })

    def delete_webhook(self) -> Request:
        return self.request("deleteWebhook")

    def get_webhook_info(self) -> Request:
        return self.request("getWebhookInfo")

    # -- sending ---------------------------------------------------------------

    def send_message(self, chat_id: ChatId, text: str) -> Request:
        return self.request("sendMessage", {"chat_id": chat_id, "text": text}, caps.SEND_TEXT)

    def forward_message(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int) -> Request:
        return self.request("forwardMessage", {
            "chat_id": chat_id,
            "from_chat_id": from_chat_id,
            "message_id": message_id,
        }, caps.NOTIFICATION_ONLY)

    def send_photo(self, chat_id: ChatId, photo: str, caption: Optional[str] = None) -> Request:
        return self.request("sendPhoto", {
            "chat_id": chat_id,
            "photo": photo,
            "caption": caption,
        }, caps.SEND_MEDIA)

    def send_audio(
        self,
        chat_id: ChatId,
        audio: str,
        caption: Optional[str] = None,
        thumb: Optional[str] = None,
        duration: Optional[int] = None,
        title: Optional[str] = None,
        performer: Optional[str] = None,
    ) -> Request:
        return self.request("sendAudio", {
            "chat_id": chat_id,
            "audio": audio,
            "caption": caption,
            "title": title,
            "performer": performer,
            "thumb": thumb,
            "duration": duration,
        }, caps.SEND_MEDIA)

    def send_document(
        self, chat_id: ChatId, document: str, caption: Optional[str] = None, thumb: Optional[str] = None,
    ) -> Request:
        return self.request("sendDocument", {
            "chat_id": chat_id,
            "document": document,
            "caption": caption,
            "thumb": thumb,
        }, caps.SEND_MEDIA)

    def send_video(
        self,
        chat_id: ChatId,
        video: str,
        caption: Optional[str] = None,
        thumb: Optional[str] = None,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        supports_streaming: Optional[bool] = None,
    ) -> Request:
        return self.request("sendVideo", {
            "chat_id": chat_id,
            "video": video,
            "caption": caption,
            "thumb": thumb,
            "duration": duration,
            "width": width,
            "height": height,
            "supports_streaming": supports_streaming,
        }, caps.SEND_MEDIA)

    def send_animation(
        self,
        chat_id: ChatId,
        animation: str,
        caption: Optional[str] = None,
        thumb: Optional[str] = None,
        duration: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> Request:
        return self.request("sendAnimation", {
            "chat_id": chat_id,
            "animation": animation,
            "caption": caption,
            "thumb": thumb,
            "duration": duration,
            "width": width,
            "height": height,
        }, caps.SEND_MEDIA)

    def send_voice(
        self, chat_id: ChatId, voice: str, caption: Optional[str] = None, duration: Optional[int] = None,
    ) -> Request:
        return self.request("sendVoice", {
            "chat_id": chat_id,
            "voice": voice,
            "caption": caption,
            "duration": duration,
        }, caps.SEND_MEDIA)

    def send_video_note(
        self,
        chat_id: ChatId,
        video_note: str,
        thumb: Optional[str] = None,
        duration: Optional[int] = None,
        length: Optional[int] = None,
    ) -> Request:
        return self.request("sendVideoNote", {
            "chat_id": chat_id,
            "video_note": video_note,
            "thumb": thumb,
            "length": length,
            "duration": duration,
        }, caps.SEND_PLAIN)

    def send_location(
        self, chat_id: ChatId, latitude: float, longitude: float, live_period: Optional[int] = None,
    ) -> Request:
        return self.request("sendLocation", {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
            "live_period": live_period,
        }, caps.SEND_PLAIN)

    def send_venue(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        title: str,
        address: str,
        foursquare_id: Optional[str] = None,
    ) -> Request:
        return self.request("sendVenue", {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
            "title": title,
            "address": address,
            "foursquare_id": foursquare_id,
        }, caps.SEND_PLAIN)

    def send_contact(
        self, chat_id: ChatId, phone_number: str, first_name: str, last_name: Optional[str] = None,
    ) -> Request:
        return self.request("sendContact", {
            "chat_id": chat_id,
            "phone_number": phone_number,
            "first_name": first_name,
            "last_name": last_name,
        }, caps.SEND_PLAIN)

    def send_sticker(self, chat_id: ChatId, sticker: str) -> Request:
        return self.request("sendSticker", {"chat_id": chat_id, "sticker": sticker}, caps.SEND_PLAIN)

    def send_game(self, chat_id: ChatId, game_short_name: str) -> Request:
        return self.request("sendGame", {
            "chat_id": chat_id,
            "game_short_name": game_short_name,
        }, caps.SEND_PLAIN)

    def send_chat_action(self, chat_id: ChatId, action: str) -> Request:
        return self.request("sendChatAction", {"chat_id": chat_id, "action": action})

    # -- editing ---------------------------------------------------------------

    def edit_message_text(
        self,
        chat_id: Optional[ChatId],
        text: str,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Request:
        _require_target(message_id, inline_message_id)
        return self.request("editMessageText", {
            "chat_id": chat_id,
            "text": text,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, caps.EDIT_TEXT)

    def edit_message_caption(
        self,
        chat_id: Optional[ChatId],
        caption: str,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Request:
        _require_target(message_id, inline_message_id)
        return self.request("editMessageCaption", {
            "chat_id": chat_id,
            "caption": caption,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, caps.EDIT_TEXT)

    def edit_message_reply_markup(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Request:
        _require_target(message_id, inline_message_id)
        return self.request("editMessageReplyMarkup", {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, caps.MARKUP_ONLY)

    def edit_message_live_location(
        self,
        chat_id: Optional[ChatId],
        latitude: float,
        longitude: float,
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Request:
        _require_target(message_id, inline_message_id)
        return self.request("editMessageLiveLocation", {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, caps.MARKUP_ONLY)

    def stop_message_live_location(
        self,
        chat_id: Optional[ChatId],
        message_id: Optional[int] = None,
        inline_message_id: Optional[str] = None,
    ) -> Request:
        _require_target(message_id, inline_message_id)
        return self.request("stopMessageLiveLocation", {
            "chat_id": chat_id,
            "message_id": message_id,
            "inline_message_id": inline_message_id,
        }, caps.MARKUP_ONLY)

    def delete_message(self, chat_id: ChatId, message_id: int) -> Request:
        return self.request("deleteMessage", {"chat_id": chat_id, "message_id": message_id})

    # -- misc ------------------------------------------------------------------

    def answer_callback_query(
        self,
        callback_query_id: str,
        text: Optional[str] = None,
        show_alert: Optional[bool] = None,
        url: Optional[str] = None,
        cache_time: Optional[int] = None,
    ) -> Request:
        return self.request("answerCallbackQuery", {
            "callback_query_id": callback_query_id,
            "text": text,
            "show_alert": show_alert,
            "url": url,
            "cache_time": cache_time,
        })

    def get_user_profile_photos(
        self, user_id: int, offset: Optional[int] = None, limit: Optional[int] = None,
    ) -> Request:
        return self.request("getUserProfilePhotos", {
            "user_id": user_id,
            "offset": offset,
            "limit": limit,
        })

    def get_file(self, file_id: str) -> Request:
        return self.request("getFile", {"file_id": file_id})
