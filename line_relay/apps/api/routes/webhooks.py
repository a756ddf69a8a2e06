"""LINE webhook delivery route."""

from __future__ import annotations

import asyncio
import json
from typing import Annotated, Any, Mapping, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from line_relay.apps.api.dependencies import get_service_container
from line_relay.core.identifiers import get_log_safe_user_id
from line_relay.core.logging import get_logger
from line_relay.core.models import CommandSource, LineEvent
from line_relay.services import ServiceContainer
from line_relay.services.reply_dispatch import relay_reply

router = APIRouter()
logger = get_logger(__name__)

RAW_LOG_EXCERPT = 200

# Strong references to in-flight reply tasks so they are not collected early.
_pending_replies: set[asyncio.Task] = set()


def _ack() -> JSONResponse:
    return JSONResponse({"ok": True})


def _first_event(payload: Any) -> Optional[Mapping[str, Any]]:
    """Return the first webhook event; later events in the batch are ignored."""
    if not isinstance(payload, Mapping):
        return None
    events = payload.get("events")
    if not isinstance(events, list) or not events:
        return None
    first = events[0]
    if len(events) > 1:
        logger.warning("webhook carried %d events; only the first is processed.", len(events))
    return first if isinstance(first, Mapping) else None


def _on_reply_done(task: asyncio.Task) -> None:
    _pending_replies.discard(task)
    if task.cancelled():
        logger.warning("reply task was cancelled.")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("reply task failed.", exc_info=exc)


def _schedule_reply(event: LineEvent, services: ServiceContainer) -> None:
    """Run reply dispatch in the background; its outcome is only logged."""
    task = asyncio.create_task(relay_reply(event, services))
    _pending_replies.add(task)
    task.add_done_callback(_on_reply_done)


@router.post("/webhook")
async def handle_line_webhook(
    request: Request,
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> JSONResponse:
    """Store the classified command, acknowledge, then reply in the background.

    The acknowledgement is always ``200 {"ok": true}``; LINE redelivers on
    anything else, which would duplicate the command.
    """
    raw = (await request.body()).decode("utf-8", errors="replace")
    try:
        payload = json.loads(raw or "{}")
    except json.JSONDecodeError:
        logger.warning("webhook JSON parse failed, raw = %s", raw[:RAW_LOG_EXCERPT])
        return _ack()

    event_data = _first_event(payload)
    if event_data is None:
        logger.info("webhook carried no events.")
        return _ack()

    event = LineEvent.from_data(event_data)
    services.store.write(event.intent, CommandSource.LINE, event.text)
    logger.info(
        "%s message from %s received: %s",
        event.message_type or "unknown",
        get_log_safe_user_id(event.user_id),
        event.text,
    )

    if event.reply_token:
        _schedule_reply(event, services)
    else:
        logger.info("event has no reply token; reply skipped.")
    return _ack()


__all__ = ["router", "handle_line_webhook"]
