"""Intent types and the keyword classifier for inbound chat text."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class IntentType(str, Enum):
    """Enumeration of all intents a message can be classified into."""

    SPIN = "spin"
    FOLLOW = "follow"
    STOP = "stop"
    REMIND = "remind"
    CHAT = "chat"


CONTROL_INTENTS = frozenset({IntentType.SPIN, IntentType.FOLLOW, IntentType.STOP})
CONVERSATIONAL_INTENTS = frozenset({IntentType.REMIND, IntentType.CHAT})

# Checked in order; control keywords win over the reminder keyword.
KEYWORD_INTENTS: tuple[tuple[str, IntentType], ...] = (
    ("轉圈", IntentType.SPIN),
    ("跟隨", IntentType.FOLLOW),
    ("停止", IntentType.STOP),
    ("提醒", IntentType.REMIND),
)


def classify(text: Optional[str]) -> IntentType:
    """Map free text to an intent, defaulting to ``chat`` when no keyword matches."""
    normalized = (text or "").strip()
    for keyword, intent in KEYWORD_INTENTS:
        if keyword in normalized:
            return intent
    return IntentType.CHAT


def _value(intent: IntentType | str) -> str:
    return intent.value if isinstance(intent, IntentType) else intent


def is_control(intent: IntentType | str) -> bool:
    """True when ``intent`` drives the robot rather than the chat backend."""
    return _value(intent) in {i.value for i in CONTROL_INTENTS}


def is_conversational(intent: IntentType | str) -> bool:
    """True when ``intent`` should be answered by the chat backend."""
    return _value(intent) in {i.value for i in CONVERSATIONAL_INTENTS}


__all__ = [
    "IntentType",
    "CONTROL_INTENTS",
    "CONVERSATIONAL_INTENTS",
    "KEYWORD_INTENTS",
    "classify",
    "is_control",
    "is_conversational",
]
