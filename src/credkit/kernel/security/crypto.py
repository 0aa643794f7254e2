"""Kernel security – PasswordHasher, EntropySource ports."""
from __future__ import annotations

import abc
from typing import Protocol


class PasswordHasher(abc.ABC):
    """Port: one-way adaptive password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


class EntropySource(Protocol):
    """Port: cryptographically secure random bytes."""

    def fill(self, n: int) -> bytes: ...


__all__ = ["EntropySource", "PasswordHasher"]
