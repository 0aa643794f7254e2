"""Kernel security – keys whose values must never reach a log record."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "plain_password", "new_password",
    "hashed", "hashed_password", "password_hash",
    "secret", "token", "reset_token", "api_key", "apikey", "authorization",
    "salt",
})


__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
