"""Application service layer scaffolding for command relay."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from line_relay.core.ports import ChatBackendPort, MessagingPort

from .command_store import CommandStore


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    store: CommandStore = field(default_factory=CommandStore)
    messaging: Optional[MessagingPort] = None
    chat_backend: Optional[ChatBackendPort] = None


def build_default_services(
    *,
    messaging_port: Optional[MessagingPort] = None,
    chat_backend_port: Optional[ChatBackendPort] = None,
    store: Optional[CommandStore] = None,
) -> ServiceContainer:
    """Return a service container with a fresh command store."""

    return ServiceContainer(
        store=store or CommandStore(),
        messaging=messaging_port,
        chat_backend=chat_backend_port,
    )


__all__ = ["ServiceContainer", "CommandStore", "build_default_services"]
