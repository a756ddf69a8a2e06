"""Single-slot, last-writer-wins register holding the latest command.

Every inbound adapter overwrites the record; the poll endpoint reads it. The
record is a frozen model swapped under a lock, so readers always see the
fields of exactly one write.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional, Union

from line_relay.core.intents import IntentType
from line_relay.core.logging import get_logger
from line_relay.core.models import NO_COMMAND, CommandSource, LastCommand

logger = get_logger(__name__)

Clock = Callable[[], int]


def now_ms() -> int:
    """Wall-clock epoch milliseconds."""
    return time.time_ns() // 1_000_000


class CommandStore:
    """Thread-safe holder of the process-wide :class:`LastCommand`."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or now_ms
        self._lock = threading.Lock()
        self._record = LastCommand(
            command=NO_COMMAND,
            source=CommandSource.INIT,
            raw="",
            timestamp=self._clock(),
        )

    def read(self) -> LastCommand:
        """Return the current record without blocking on writers for long."""
        with self._lock:
            return self._record

    def write(
        self,
        command: Union[IntentType, str],
        source: Union[CommandSource, str],
        raw: str,
    ) -> LastCommand:
        """Replace the stored record and return the new one.

        The timestamp is bumped past the previous one when the clock has not
        advanced, so timestamps strictly increase across writes.
        """
        command_value = command.value if isinstance(command, IntentType) else str(command)
        with self._lock:
            timestamp = max(self._clock(), self._record.timestamp + 1)
            record = LastCommand(
                command=command_value,
                source=CommandSource(source),
                raw=raw,
                timestamp=timestamp,
            )
            self._record = record
        logger.info(
            "last command set to %s from %s.",
            record.command,
            record.source.value,
            extra={"command_timestamp": record.timestamp},
        )
        return record


__all__ = ["CommandStore", "now_ms"]
