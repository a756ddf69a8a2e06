"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from line_relay.core.intents import IntentType, classify

NO_COMMAND = "none"


@dataclass(slots=True)
class RequestContext:
    """Metadata describing an inbound API request."""

    correlation_id: str
    path: str
    method: str
    user_agent: Optional[str] = None
    client_ip: Optional[str] = None


class CommandSource(str, Enum):
    """Where the stored command came from."""

    INIT = "init"
    MANUAL = "manual"
    LINE = "line"


class LastCommand(BaseModel):
    """Most recently observed intent; replaced wholesale on every write."""

    model_config = ConfigDict(frozen=True)

    command: str
    source: CommandSource
    raw: str = ""
    timestamp: int


class ControlEvent(BaseModel):
    """Control intent handed to polling robot clients."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["control"] = "control"
    command: str
    text: str
    timestamp: int

    @classmethod
    def from_command(cls, record: LastCommand) -> "ControlEvent":
        """Build an event whose id is derived from the record timestamp."""
        return cls(
            id=f"cmd-{record.timestamp}",
            command=record.command,
            text=record.raw,
            timestamp=record.timestamp,
        )


@dataclass(slots=True)
class LineEvent:
    """The parts of a LINE webhook event the relay acts on."""

    text: str = ""
    reply_token: Optional[str] = None
    user_id: Optional[str] = None
    message_type: Optional[str] = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "LineEvent":
        """Build a LineEvent from one element of a webhook ``events`` list.

        Non-text messages yield empty text; missing fields are tolerated.
        """
        message = data.get("message")
        message_type = None
        text = ""
        if isinstance(message, Mapping):
            message_type = message.get("type")
            body = message.get("text")
            if message_type == "text" and isinstance(body, str):
                text = body

        reply_token = data.get("replyToken")
        if not isinstance(reply_token, str) or not reply_token:
            reply_token = None

        user_id = None
        source = data.get("source")
        if isinstance(source, Mapping):
            candidate = source.get("userId")
            if isinstance(candidate, str) and candidate:
                user_id = candidate

        return cls(
            text=text,
            reply_token=reply_token,
            user_id=user_id,
            message_type=message_type if isinstance(message_type, str) else None,
        )

    @property
    def intent(self) -> IntentType:
        """Classified intent of the event text."""
        return classify(self.text)


__all__ = [
    "NO_COMMAND",
    "RequestContext",
    "CommandSource",
    "LastCommand",
    "ControlEvent",
    "LineEvent",
]
