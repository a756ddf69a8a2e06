"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from line_relay.adapters.chat_backend import ChatBackendAdapter
from line_relay.adapters.line_messaging import LineMessagingAdapter
from line_relay.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(
        messaging_port=LineMessagingAdapter(),
        chat_backend_port=ChatBackendAdapter(),
    )


__all__ = ["build_default_service_container"]
