"""Application-layer errors – the surface credential operations fail with."""

from __future__ import annotations

from typing import Any

from credkit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InternalServerError(ApplicationError):
    """The single externally visible failure kind of credential operations.

    The message is fixed per operation and never embeds the text of the
    underlying exception, which stays on ``__cause__`` for server-side logs.
    """

    default_code = "internal_server_error"
    expose_cause = False

    def __init__(self, message: str = "Internal server error", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidArgumentError(InternalServerError):
    """Input rejected before any cryptographic work was done.

    Callers that only catch :class:`InternalServerError` see it as such; the
    message tells bad input apart from infrastructure failure.
    """

    default_code = "invalid_argument"


__all__ = [
    "ApplicationError",
    "InternalServerError",
    "InvalidArgumentError",
]
