"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol


class MessagingPort(Protocol):
    """Port exposing replies to the messaging platform."""

    async def reply_text(self, reply_token: str, text: str) -> None:
        """Reply to the event identified by the single-use ``reply_token``."""
        ...


class ChatBackendPort(Protocol):
    """Port exposing the upstream conversational backend."""

    async def forward(self, user_id: str, text: str) -> str:
        """Return the backend's reply to ``text`` sent by ``user_id``."""
        ...


__all__ = ["MessagingPort", "ChatBackendPort"]
