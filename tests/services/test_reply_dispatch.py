"""Tests for reply text selection and delivery."""
# pylint: disable=missing-function-docstring

import asyncio

import pytest

from line_relay.core.exceptions import (
    ChatBackendError,
    ChatBackendNotConfiguredError,
    LineReplyError,
)
from line_relay.core.intents import IntentType
from line_relay.core.models import LineEvent
from line_relay.services import reply_dispatch
from line_relay.services.reply_dispatch import (
    EMPTY_REPLY_PLACEHOLDER,
    build_reply_text,
    relay_reply,
)


def _event(text: str, reply_token: str | None = "reply-token", user_id: str | None = "U1"):
    return LineEvent(text=text, reply_token=reply_token, user_id=user_id, message_type="text")


@pytest.mark.parametrize("intent", [IntentType.SPIN, IntentType.FOLLOW, IntentType.STOP])
def test_control_intents_get_canned_ack(intent, chat_backend) -> None:
    text = asyncio.run(
        build_reply_text(intent, user_id="U1", text="x", chat_backend=chat_backend)
    )
    assert text == f"received command: {intent.value}"
    assert chat_backend.calls == []


@pytest.mark.parametrize("intent", [IntentType.CHAT, IntentType.REMIND])
def test_conversational_intents_are_forwarded(intent, chat_backend) -> None:
    chat_backend.reply = "Hi!"
    text = asyncio.run(
        build_reply_text(intent, user_id="U1", text="你好", chat_backend=chat_backend)
    )
    assert text == "Hi!"
    assert chat_backend.calls == [("U1", "你好")]


def test_reply_is_relayed_verbatim(chat_backend) -> None:
    chat_backend.reply = "  spaced reply \n"
    text = asyncio.run(
        build_reply_text(IntentType.CHAT, user_id="U1", text="hi", chat_backend=chat_backend)
    )
    assert text == "  spaced reply \n"


@pytest.mark.parametrize("reply", ["", "   "])
def test_empty_reply_uses_placeholder(reply, chat_backend) -> None:
    chat_backend.reply = reply
    text = asyncio.run(
        build_reply_text(IntentType.CHAT, user_id="U1", text="hi", chat_backend=chat_backend)
    )
    assert text == EMPTY_REPLY_PLACEHOLDER


def test_backend_error_uses_fallback_with_cause(chat_backend) -> None:
    chat_backend.error = ChatBackendNotConfiguredError("Missing CHAT_BACKEND_BASE_URL")
    text = asyncio.run(
        build_reply_text(IntentType.CHAT, user_id="U1", text="hi", chat_backend=chat_backend)
    )
    assert "Missing CHAT_BACKEND_BASE_URL" in text
    assert text == reply_dispatch.backend_fallback_text(chat_backend.error)


def test_missing_user_id_is_forwarded_as_anonymous(chat_backend) -> None:
    chat_backend.reply = "ok"
    asyncio.run(
        build_reply_text(IntentType.CHAT, user_id=None, text="hi", chat_backend=chat_backend)
    )
    assert chat_backend.calls == [(reply_dispatch.ANONYMOUS_USER_ID, "hi")]


def test_missing_chat_backend_port_uses_fallback() -> None:
    text = asyncio.run(
        build_reply_text(IntentType.CHAT, user_id="U1", text="hi", chat_backend=None)
    )
    assert "not configured" in text


def test_relay_reply_sends_ack_for_stop(services, messaging, chat_backend) -> None:
    sent = asyncio.run(relay_reply(_event("停止"), services))
    assert sent == "received command: stop"
    assert messaging.replies == [("reply-token", "received command: stop")]
    assert chat_backend.calls == []


def test_relay_reply_relays_backend_reply(services, messaging, chat_backend) -> None:
    chat_backend.reply = "Hi!"
    asyncio.run(relay_reply(_event("你好"), services))
    assert messaging.replies == [("reply-token", "Hi!")]


def test_relay_reply_sends_fallback_on_backend_error(services, messaging, chat_backend) -> None:
    chat_backend.error = ChatBackendError("chat backend returned 502: bad gateway")
    asyncio.run(relay_reply(_event("你好"), services))
    assert len(messaging.replies) == 1
    assert "chat backend returned 502: bad gateway" in messaging.replies[0][1]


def test_relay_reply_skips_without_reply_token(services, messaging, chat_backend) -> None:
    assert asyncio.run(relay_reply(_event("你好", reply_token=None), services)) is None
    assert messaging.replies == []
    assert chat_backend.calls == []


def test_relay_reply_swallows_messaging_errors(services, messaging) -> None:
    messaging.error = LineReplyError("LINE reply failed: 400 Invalid reply token")
    assert asyncio.run(relay_reply(_event("轉圈"), services)) is None
