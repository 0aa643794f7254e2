"""Error classification for credential operations.

Every public operation runs its cryptographic work inside
:func:`classify_errors`.  Whatever escapes the guarded region (entropy
failure, bcrypt error, encoding error, a lower layer's own classified
error) is replaced by one :class:`InternalServerError` carrying the fixed
message of the calling operation::

    with classify_errors("Failed to hash password"):
        return bcrypt.hashpw(...)

It also works as a decorator::

    @classify_errors("Failed to generate secure token")
    def issue(length: int = 32) -> str: ...
"""
from __future__ import annotations

import contextlib
from collections.abc import Iterator

from credkit.kernel.errors.application import InternalServerError
from credkit.observability.logging.processors import get_logger

_logger = get_logger(__name__)


@contextlib.contextmanager
def classify_errors(message: str) -> Iterator[None]:
    """Re-raise any exception from the block as ``InternalServerError(message)``."""
    try:
        yield
    except Exception as exc:
        # Already logged by the inner region that classified it.
        if not isinstance(exc, InternalServerError):
            # Server-side only; the raised error carries nothing but *message*.
            _logger.error(
                "credential_operation_failed",
                operation=message,
                error_type=type(exc).__name__,
                exc_info=exc,
            )
        raise InternalServerError(message, cause=exc) from exc


__all__ = ["classify_errors"]
