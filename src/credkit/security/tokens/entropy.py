"""Security – OS-backed entropy source."""
from __future__ import annotations

import secrets


class OsEntropySource:
    """:class:`~credkit.kernel.security.EntropySource` backed by the OS CSPRNG.

    Failures of the underlying interface propagate unchanged; classification
    happens in the generators that call it.
    """

    def fill(self, n: int) -> bytes:
        return secrets.token_bytes(n)


__all__ = ["OsEntropySource"]
