"""Pytest configuration: hermetic env defaults and in-memory fake ports.

Environment defaults are set before any ``line_relay`` import so settings
never pick up real credentials during tests.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

os.environ.setdefault("LINE_RELAY_LOG_LEVEL", "debug")
os.environ.setdefault("LOG_PSEUDONYM_SECRET", "test-secret")

from fastapi.testclient import TestClient  # noqa: E402

from line_relay.apps.api.app import create_app  # noqa: E402
from line_relay.core.exceptions import ChatBackendError, LineReplyError  # noqa: E402
from line_relay.services import CommandStore, ServiceContainer  # noqa: E402


class FakeMessaging:
    """Records replies instead of calling LINE."""

    def __init__(self) -> None:
        self.replies: list[tuple[str, str]] = []
        self.error: LineReplyError | None = None

    async def reply_text(self, reply_token: str, text: str) -> None:
        if self.error is not None:
            raise self.error
        self.replies.append((reply_token, text))


class FakeChatBackend:
    """Returns a canned reply (or raises) and records forwarded calls."""

    def __init__(self, reply: str = "") -> None:
        self.reply = reply
        self.error: ChatBackendError | None = None
        self.calls: list[tuple[str, str]] = []

    async def forward(self, user_id: str, text: str) -> str:
        self.calls.append((user_id, text))
        if self.error is not None:
            raise self.error
        return self.reply


class StepClock:
    """Deterministic millisecond clock; ``tick`` advances it."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def tick(self, ms: int = 1) -> None:
        self.now += ms


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def store(clock: StepClock) -> CommandStore:
    return CommandStore(clock=clock)


@pytest.fixture
def messaging() -> FakeMessaging:
    return FakeMessaging()


@pytest.fixture
def chat_backend() -> FakeChatBackend:
    return FakeChatBackend()


@pytest.fixture
def services(
    store: CommandStore, messaging: FakeMessaging, chat_backend: FakeChatBackend
) -> ServiceContainer:
    return ServiceContainer(store=store, messaging=messaging, chat_backend=chat_backend)


@pytest.fixture
def client(services: ServiceContainer) -> TestClient:
    """Test client bound to an app wired with the fake ports."""
    return TestClient(create_app(services))
