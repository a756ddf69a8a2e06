"""Polling route for robot clients waiting on control commands."""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from line_relay.apps.api.dependencies import get_command_store
from line_relay.services import CommandStore
from line_relay.services.polling import parse_since, poll

router = APIRouter()


@router.get("/pull")
async def pull_control_command(
    store: Annotated[CommandStore, Depends(get_command_store)],
    since: Optional[str] = None,
) -> Response:
    """Return the pending control event, or 204 when nothing changed."""
    event = poll(store, parse_since(since))
    if event is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(event.model_dump(mode="json"))


__all__ = ["router"]
