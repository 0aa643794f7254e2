"""Security – bcrypt password hashing and verification.

The cost factor is read from a settings provider on every call, so flipping
``CREDKIT_PRODUCTION`` takes effect on the next hash without a restart.
Stored hashes are bcrypt modular-crypt strings (``$2b$<cost>$<salt+digest>``)
and should be persisted verbatim.

Hashing is CPU-bound (tens to hundreds of milliseconds at production cost).
asyncio callers should use :func:`hash_password_async` and
:func:`verify_password_async`, which run the work on the default thread pool.
"""
from __future__ import annotations

import asyncio

import bcrypt

from credkit.config.settings.hashing import SettingsProvider, load_hashing_settings
from credkit.kernel.errors import InvalidArgumentError, classify_errors
from credkit.kernel.security import PasswordHasher
from credkit.observability.logging import get_logger

_logger = get_logger(__name__)

# bcrypt only reads this many bytes of a password.
MAX_PASSWORD_BYTES = 72

HASH_FAILED = "Failed to hash password"
VERIFY_FAILED = "Failed to verify password"


def _is_text(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


def _encode(password: str) -> bytes:
    try:
        return password.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError("Password must be valid Unicode text") from exc


class BcryptPasswordHasher(PasswordHasher):
    """Adaptive, salted password hashing on top of :mod:`bcrypt`.

    Args:
        settings_provider: Returns the :class:`HashingSettings` to use; called
            once per :meth:`hash`.  Defaults to reading the environment.
    """

    def __init__(self, settings_provider: SettingsProvider | None = None) -> None:
        self._settings_provider = settings_provider or load_hashing_settings

    def cost_factor(self) -> int:
        settings = self._settings_provider()
        rounds = settings.cost_factor()
        _logger.debug("password_cost_factor", rounds=rounds, production=settings.production)
        return rounds

    def hash(self, password: str) -> str:
        if not _is_text(password):
            raise InvalidArgumentError("Password must be a non-empty string")
        encoded = _encode(password)
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidArgumentError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        with classify_errors(HASH_FAILED):
            salt = bcrypt.gensalt(rounds=self.cost_factor())
            return bcrypt.hashpw(encoded, salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        """Return whether *password* reproduces *hashed*.

        ``False`` means the password is wrong.  An unusable *hashed* value
        raises instead, so a broken record is never mistaken for a bad
        password.  A candidate longer than :data:`MAX_PASSWORD_BYTES` cannot
        match anything :meth:`hash` produced and is reported as ``False``.
        """
        if not (_is_text(password) and _is_text(hashed)):
            raise InvalidArgumentError("Both password and hashed password must be provided")

        candidate = _encode(password)
        too_long = len(candidate) > MAX_PASSWORD_BYTES
        with classify_errors(VERIFY_FAILED):
            # Still run checkpw so *hashed* is validated and timing stays the same;
            # hash() never accepts an empty password, so b"" cannot match.
            matched = bcrypt.checkpw(b"" if too_long else candidate, hashed.encode("utf-8"))
        return matched and not too_long


def hash_password(password: str, *, settings_provider: SettingsProvider | None = None) -> str:
    return BcryptPasswordHasher(settings_provider).hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return BcryptPasswordHasher().verify(password, hashed)


async def hash_password_async(
    password: str, *, settings_provider: SettingsProvider | None = None
) -> str:
    return await asyncio.to_thread(hash_password, password, settings_provider=settings_provider)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await asyncio.to_thread(verify_password, password, hashed)


__all__ = [
    "BcryptPasswordHasher",
    "HASH_FAILED",
    "MAX_PASSWORD_BYTES",
    "VERIFY_FAILED",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
