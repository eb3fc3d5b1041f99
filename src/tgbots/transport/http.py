"""
Blocking HTTP client for the Telegram Bot API.

Every call is a JSON POST to ``{base_url}/bot{token}/{method}``. The Bot API
wraps results as ``{"ok": true, "result": ...}`` or
``{"ok": false, "description": ..., "error_code": ...}``.
"""

import logging
import time
from typing import Any, Optional

import httpx

from tgbots.config import CONNECT_TIMEOUT, DEFAULT_BASE_URL, REQUEST_TIMEOUT
from tgbots.errors import ApiError, TransportError
from tgbots.models.response import Response

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        connect_timeout: float = CONNECT_TIMEOUT,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            headers={"User-Agent": "tgbots/0.1.0", "Accept": "application/json"},
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            transport=transport,
        )

    @property
    def token(self) -> str:
        return self._token

    def method_url(self, method: str) -> str:
        return f"{self._base_url}/bot{self._token}/{method}"

    def file_url(self, file_path: str) -> str:
        """Download URL for a ``file_path`` returned by ``getFile``."""
        return f"{self._base_url}/file/bot{self._token}/{file_path.lstrip('/')}"

    def post(self, method: str, body: Optional[dict[str, Any]] = None) -> Response:
        logger.debug("POST %s params=%s", method, sorted(body or {}))
        started = time.perf_counter()
        try:
            resp = self._client.post(
                self.method_url(method),
                json=body or {},
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.warning("%s failed: %s", method, exc)
            raise TransportError(f"{method}: {exc}") from exc

        payload = self._decode(method, resp)
        if payload.get("ok") is False:
            description = payload.get("description") or "telegram api error"
            logger.warning("%s rejected (%s): %s", method, payload.get("error_code"), description)
            raise ApiError(description, payload.get("error_code"))

        if resp.status_code != 200:
            raise TransportError(f"HTTP error #{resp.status_code}", resp.status_code)

        return Response(
            method=method,
            result=payload.get("result"),
            status_code=resp.status_code,
            elapsed=time.perf_counter() - started,
        )

    @staticmethod
    def _decode(method: str, resp: httpx.Response) -> dict[str, Any]:
        """Decode the body, or fail with the HTTP status if it is empty or not JSON."""
        if not resp.content:
            raise TransportError(f"{method}: empty result (HTTP {resp.status_code})", resp.status_code)
        try:
            payload = resp.json()
        except ValueError as exc:
            raise TransportError(
                f"{method}: non-JSON result (HTTP {resp.status_code}): {resp.text[:200]}",
                resp.status_code,
            ) from exc
        if not isinstance(payload, dict):
            raise TransportError(f"{method}: unexpected result (HTTP {resp.status_code})", resp.status_code)
        return payload

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()
