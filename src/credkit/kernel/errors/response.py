"""Error response envelope for callers that expose credential failures."""
from __future__ import annotations

from typing import Any

from credkit.kernel.errors.base import BaseError
from credkit.observability.logging.processors import get_logger

_logger = get_logger(__name__)

GENERIC_MESSAGE = "An unexpected error occurred"


def format_error_response(error: BaseException) -> dict[str, Any]:
    """Convert *error* into ``{"status": "error", "code": ..., "message": ...}``.

    Errors of the credkit hierarchy keep their code and safe message.  Any
    other exception is reported with a generic message so its text never
    reaches the response.
    """
    if isinstance(error, BaseError):
        return {"status": "error", "code": error.code, "message": error.message}

    _logger.error("unhandled_error_type", error_type=type(error).__name__)
    return {
        "status": "error",
        "code": "internal_server_error",
        "message": GENERIC_MESSAGE,
    }


__all__ = ["GENERIC_MESSAGE", "format_error_response"]
