"""Messaging adapter replying to LINE events through the Reply API."""

from __future__ import annotations

from typing import Optional

import httpx

from line_relay.core.config import Settings, config
from line_relay.core.exceptions import LineReplyError, LineReplyNotConfiguredError
from line_relay.core.logging import get_logger
from line_relay.core.ports import MessagingPort

logger = get_logger(__name__)


def _truncate(text: str, limit: int) -> str:
    if limit <= 0 or len(text) <= limit:
        return text
    logger.warning("reply text of %d chars truncated to %d.", len(text), limit)
    return text[:limit]


class LineMessagingAdapter(MessagingPort):
    """Concrete adapter posting text replies to the LINE Reply API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or config
        self._transport = transport

    async def reply_text(self, reply_token: str, text: str) -> None:
        token = self._settings.LINE_CHANNEL_ACCESS_TOKEN
        if not token:
            raise LineReplyNotConfiguredError("Missing LINE_CHANNEL_ACCESS_TOKEN")

        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        payload = {
            "replyToken": reply_token,
            "messages": [
                {"type": "text", "text": _truncate(text, self._settings.MAX_LINE_TEXT_LENGTH)}
            ],
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._settings.LINE_REPLY_API_URL, headers=headers, json=payload
                )
        except httpx.HTTPError as exc:
            raise LineReplyError(f"LINE reply request failed: {exc}") from exc

        if not response.is_success:
            raise LineReplyError(f"LINE reply failed: {response.status_code} {response.text}")
        logger.info("LINE reply accepted with status %s.", response.status_code)


__all__ = ["LineMessagingAdapter"]
