"""Tests for the keyword intent classifier."""
# pylint: disable=missing-function-docstring

import pytest

from line_relay.core.intents import (
    IntentType,
    classify,
    is_control,
    is_conversational,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("請轉圈", IntentType.SPIN),
        ("跟隨我", IntentType.FOLLOW),
        ("停止", IntentType.STOP),
        ("明天提醒我吃藥", IntentType.REMIND),
        ("你好", IntentType.CHAT),
        ("", IntentType.CHAT),
        ("   ", IntentType.CHAT),
        ("not json", IntentType.CHAT),
    ],
)
def test_classify_keywords(text: str, expected: IntentType) -> None:
    assert classify(text) is expected


def test_classify_none_is_chat() -> None:
    assert classify(None) is IntentType.CHAT


def test_control_keyword_beats_reminder() -> None:
    assert classify("提醒我停止") is IntentType.STOP
    assert classify("提醒你轉圈") is IntentType.SPIN


def test_control_keywords_follow_priority_order() -> None:
    assert classify("停止跟隨然後轉圈") is IntentType.SPIN
    assert classify("停止跟隨") is IntentType.FOLLOW


def test_classify_is_deterministic() -> None:
    samples = ["轉圈", "hello", "提醒", "  停止  "]
    assert [classify(s) for s in samples] == [classify(s) for s in samples]


def test_intent_groups() -> None:
    for intent in (IntentType.SPIN, IntentType.FOLLOW, IntentType.STOP):
        assert is_control(intent)
        assert is_control(intent.value)
        assert not is_conversational(intent)
    for intent in (IntentType.CHAT, IntentType.REMIND):
        assert is_conversational(intent)
        assert not is_control(intent)
    assert not is_control("none")
    assert not is_conversational("none")
