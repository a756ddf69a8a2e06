"""Core exception types shared across layers."""


class RelayError(Exception):
    """Base class for outbound relay failures."""


class ChatBackendError(RelayError):
    """Raised when forwarding text to the chat backend fails."""


class ChatBackendNotConfiguredError(ChatBackendError):
    """Raised when no chat backend base URL is configured."""


class LineReplyError(RelayError):
    """Raised when the LINE Reply API call fails."""


class LineReplyNotConfiguredError(LineReplyError):
    """Raised when no LINE channel access token is configured."""


__all__ = [
    "RelayError",
    "ChatBackendError",
    "ChatBackendNotConfiguredError",
    "LineReplyError",
    "LineReplyNotConfiguredError",
]
