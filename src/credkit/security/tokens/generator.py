"""Security – random hex byte strings and secure tokens.

Usage::

    from credkit.security.tokens import generate_secure_token

    reset_code = generate_secure_token()        # 64 hex chars
    api_key = generate_secure_token(48)         # 96 hex chars
"""
from __future__ import annotations

import asyncio

from credkit.kernel.errors import InvalidArgumentError, classify_errors
from credkit.kernel.security import EntropySource
from credkit.security.tokens.entropy import OsEntropySource

DEFAULT_TOKEN_BYTES = 32

RANDOM_BYTES_FAILED = "Failed to generate random bytes"
SECURE_TOKEN_FAILED = "Failed to generate secure token"


def _validate_length(length: object) -> int:
    # bool is an int subclass but never a meaningful byte count.
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidArgumentError("Length must be a positive integer")
    return length


class RandomByteGenerator:
    """Draws *length* bytes from an entropy source and hex-encodes them."""

    def __init__(self, entropy: EntropySource | None = None) -> None:
        self._entropy = entropy or OsEntropySource()

    def generate(self, length: int) -> str:
        """Return ``2 * length`` lowercase hex characters.

        Raises:
            InvalidArgumentError: *length* is not a positive integer.
            InternalServerError: the entropy source failed.
        """
        length = _validate_length(length)
        with classify_errors(RANDOM_BYTES_FAILED):
            raw = self._entropy.fill(length)
            if len(raw) != length:
                raise ValueError(f"entropy source returned {len(raw)} of {length} bytes")
            return raw.hex()


class SecureTokenGenerator:
    """Issues hex tokens for sessions, reset codes and API keys."""

    def __init__(self, random_bytes: RandomByteGenerator | None = None) -> None:
        self._random_bytes = random_bytes or RandomByteGenerator()

    def issue(self, length: int = DEFAULT_TOKEN_BYTES) -> str:
        with classify_errors(SECURE_TOKEN_FAILED):
            return self._random_bytes.generate(length)


_random_bytes = RandomByteGenerator()
_tokens = SecureTokenGenerator(_random_bytes)


def generate_random_bytes(length: int) -> str:
    """Hex-encode *length* fresh random bytes from the OS."""
    return _random_bytes.generate(length)


def generate_secure_token(length: int = DEFAULT_TOKEN_BYTES) -> str:
    """Issue a hex token of *length* random bytes (default 32)."""
    return _tokens.issue(length)


async def generate_random_bytes_async(length: int) -> str:
    return await asyncio.to_thread(generate_random_bytes, length)


async def generate_secure_token_async(length: int = DEFAULT_TOKEN_BYTES) -> str:
    return await asyncio.to_thread(generate_secure_token, length)


__all__ = [
    "DEFAULT_TOKEN_BYTES",
    "RANDOM_BYTES_FAILED",
    "RandomByteGenerator",
    "SECURE_TOKEN_FAILED",
    "SecureTokenGenerator",
    "generate_random_bytes",
    "generate_random_bytes_async",
    "generate_secure_token",
    "generate_secure_token_async",
]
