"""Identifier helpers for producing log-safe user tokens."""

from __future__ import annotations

import base64
import hashlib
import hmac
from functools import lru_cache
from typing import Optional

from line_relay.core.config import config


def _encode_digest(digest: bytes) -> str:
    """URL-safe base64 encoding without padding."""
    token = base64.urlsafe_b64encode(digest).decode("ascii")
    return token.rstrip("=")


def _pseudonymize(value: str, secret: str, length: int = 16) -> str:
    """Return a deterministic pseudonym for a value using the provided secret."""
    digest = hmac.new(secret.encode("utf-8"), value.encode("utf-8"), hashlib.sha256).digest()
    token = _encode_digest(digest)
    return token[:length]


@lru_cache(maxsize=4096)
def _pseudonym_cache(user_id: str, secret: str) -> str:
    return _pseudonymize(user_id, secret)


def get_log_safe_user_id(user_id: Optional[str], *, secret: Optional[str] = None) -> str:
    """Return a deterministic, non-reversible identifier suitable for logs."""
    if not user_id:
        return "-"
    return _pseudonym_cache(user_id, secret or config.LOG_PSEUDONYM_SECRET)


def clear_log_safe_user_cache() -> None:
    """Clear cached pseudonyms (useful for tests or secret rotation)."""
    _pseudonym_cache.cache_clear()


__all__ = ["get_log_safe_user_id", "clear_log_safe_user_cache"]
