"""Manual command injection and last-command inspection routes."""

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from line_relay.apps.api.dependencies import get_command_store
from line_relay.core.intents import classify
from line_relay.core.logging import get_logger
from line_relay.core.models import CommandSource
from line_relay.services import CommandStore

router = APIRouter()
logger = get_logger(__name__)


def extract_manual_text(raw: str) -> str:
    """Pull the command text out of a manual request body.

    JSON objects contribute ``text`` (or ``command``); anything that is not a
    JSON object is taken verbatim as the text.
    """
    try:
        payload: Any = json.loads(raw or "{}")
    except json.JSONDecodeError:
        return raw
    if not isinstance(payload, dict):
        return raw
    for key in ("text", "command"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


@router.get("/last")
async def read_last_command(
    store: Annotated[CommandStore, Depends(get_command_store)],
) -> dict[str, Any]:
    """Return the current last-command record."""
    return store.read().model_dump(mode="json")


@router.post("/command")
async def post_command(
    request: Request,
    store: Annotated[CommandStore, Depends(get_command_store)],
) -> dict[str, Any]:
    """Classify manually supplied text and store it; never rejects the body."""
    body = await request.body()
    text = extract_manual_text(body.decode("utf-8", errors="replace"))
    record = store.write(classify(text), CommandSource.MANUAL, text)
    logger.info("manual command received: %s", record.command)
    return {"ok": True, "lastCommand": record.model_dump(mode="json")}


__all__ = ["router", "extract_manual_text"]
