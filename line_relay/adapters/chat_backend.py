"""Chat backend adapter forwarding conversational text upstream."""

from __future__ import annotations

import json
from typing import Optional

import httpx

from line_relay.core.config import Settings, config
from line_relay.core.exceptions import ChatBackendError, ChatBackendNotConfiguredError
from line_relay.core.logging import get_logger
from line_relay.core.ports import ChatBackendPort

logger = get_logger(__name__)

CHAT_PATH = "/chat"
ERROR_BODY_EXCERPT = 200


class ChatBackendAdapter(ChatBackendPort):
    """Single best-effort POST of ``{user_id, text}`` to ``<base>/chat``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or config
        self._transport = transport

    def _chat_url(self) -> str:
        base_url = (self._settings.CHAT_BACKEND_BASE_URL or "").strip()
        if not base_url:
            raise ChatBackendNotConfiguredError("Missing CHAT_BACKEND_BASE_URL")
        return base_url.rstrip("/") + CHAT_PATH

    async def forward(self, user_id: str, text: str) -> str:
        url = self._chat_url()
        payload = {"user_id": user_id, "text": text}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise ChatBackendError(f"chat backend request failed: {exc}") from exc

        if not response.is_success:
            raise ChatBackendError(
                f"chat backend returned {response.status_code}: "
                f"{response.text[:ERROR_BODY_EXCERPT]}"
            )
        return _extract_reply(response)


def _extract_reply(response: httpx.Response) -> str:
    """Return the ``reply`` string from a backend response, or ``""``."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("chat backend returned a non-JSON body; treating reply as empty.")
        return ""
    if not isinstance(body, dict):
        return ""
    reply = body.get("reply")
    return reply if isinstance(reply, str) else ""


__all__ = ["ChatBackendAdapter", "CHAT_PATH"]
