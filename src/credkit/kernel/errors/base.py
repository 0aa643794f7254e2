"""Root error class for the credkit error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description, safe to show to API consumers.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context (serialisable dict).
        cause: Original exception that triggered this error.

    ``expose_cause`` controls whether :meth:`to_dict` (and therefore
    ``str()``) mentions *cause*.  Errors that cross the credential boundary
    turn it off; the cause then lives only on ``__cause__`` for logs.
    """

    default_code: ClassVar[str] = "base_error"
    status_code: ClassVar[int] = 500
    expose_cause: ClassVar[bool] = True

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.expose_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
