"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

import re
from typing import Any

from credkit.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

# Modular-crypt bcrypt strings, wherever they appear in a value.
_BCRYPT_RE = re.compile(r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}")


class SensitiveFieldsFilter:
    """Blank out credentials before an event dict is rendered.

    Values under sensitive keys become ``[REDACTED]``.  bcrypt hashes found
    inside other string values are replaced too, so a stored credential that
    ends up in a free-form field still never reaches the log.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, str):
            return _BCRYPT_RE.sub(self.REDACTED, value)
        return value

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            k: (self.REDACTED if k.lower() in self._fields else self._scrub(v))
            for k, v in data.items()
        }

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = self._scrub(v)
        return result


__all__ = ["SensitiveFieldsFilter"]
