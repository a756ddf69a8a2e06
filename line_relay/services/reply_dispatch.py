"""Decide what to say back to a LINE event and deliver it."""

from __future__ import annotations

import time
from typing import Optional

from line_relay.core.exceptions import ChatBackendError, RelayError
from line_relay.core.identifiers import get_log_safe_user_id
from line_relay.core.intents import IntentType, is_control
from line_relay.core.logging import get_logger, log_user_id_context
from line_relay.core.models import LineEvent
from line_relay.core.ports import ChatBackendPort

from . import ServiceContainer

logger = get_logger(__name__)

ANONYMOUS_USER_ID = "anonymous"
EMPTY_REPLY_PLACEHOLDER = "(the chat backend returned an empty reply)"


def control_ack_text(intent: IntentType | str) -> str:
    """Fixed acknowledgement for control intents."""
    value = intent.value if isinstance(intent, IntentType) else intent
    return f"received command: {value}"


def backend_fallback_text(error: Exception) -> str:
    """User-facing text when forwarding fails; keeps the cause for debugging."""
    return f"Sorry, the chat backend is unavailable right now ({error})."


async def build_reply_text(
    intent: IntentType,
    *,
    user_id: Optional[str],
    text: str,
    chat_backend: Optional[ChatBackendPort],
) -> str:
    """Return canned text for control intents, otherwise the backend's reply."""
    if is_control(intent):
        return control_ack_text(intent)

    if chat_backend is None:
        return backend_fallback_text(ChatBackendError("chat backend is not configured"))
    try:
        reply = await chat_backend.forward(user_id or ANONYMOUS_USER_ID, text)
    except ChatBackendError as exc:
        logger.error("forwarding to chat backend failed: %s", exc)
        return backend_fallback_text(exc)
    if not reply.strip():
        return EMPTY_REPLY_PLACEHOLDER
    return reply


async def relay_reply(event: LineEvent, services: ServiceContainer) -> Optional[str]:
    """Build and send the reply for ``event``; return the text that was sent.

    Failures are logged and swallowed: the webhook has already been
    acknowledged, so there is nobody left to report them to.
    """
    if not event.reply_token:
        logger.info("no reply token on event; skipping reply.")
        return None

    start_time = time.time()
    with log_user_id_context(get_log_safe_user_id(event.user_id)):
        reply_text = await build_reply_text(
            event.intent,
            user_id=event.user_id,
            text=event.text,
            chat_backend=services.chat_backend,
        )
        messaging = services.messaging
        if messaging is None:
            logger.error("MessagingPort has not been configured; dropping reply.")
            return None
        try:
            await messaging.reply_text(event.reply_token, reply_text)
        except RelayError as exc:
            logger.error("LINE reply error: %s", exc)
            return None
        logger.info(
            "reply for %s delivered in %.2f seconds.",
            event.intent.value,
            time.time() - start_time,
        )
    return reply_text


__all__ = [
    "ANONYMOUS_USER_ID",
    "EMPTY_REPLY_PLACEHOLDER",
    "backend_fallback_text",
    "build_reply_text",
    "control_ack_text",
    "relay_reply",
]
