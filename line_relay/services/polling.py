"""Pull-based view of the command store for robot clients."""

from __future__ import annotations

import math
from typing import Any, Optional

from line_relay.core.intents import is_control
from line_relay.core.models import ControlEvent

from .command_store import CommandStore


def parse_since(value: Any) -> int:
    """Coerce a client-supplied ``since`` watermark; junk means ``0``.

    Fractional milliseconds are floored, so a watermark echoed back from a
    float clock still suppresses the event it was taken from.
    """
    if value is None:
        return 0
    raw = str(value).strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        parsed = float(raw)
    except ValueError:
        return 0
    if not math.isfinite(parsed):
        return 0
    return math.floor(parsed)


def poll(store: CommandStore, since: int) -> Optional[ControlEvent]:
    """Return the stored control command if it changed after ``since``.

    ``None`` means nothing new: either the record is not newer than the
    watermark or it is not a control intent.
    """
    record = store.read()
    if record.timestamp <= since:
        return None
    if not is_control(record.command):
        return None
    return ControlEvent.from_command(record)


__all__ = ["parse_since", "poll"]
