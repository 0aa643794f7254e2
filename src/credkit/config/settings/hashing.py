"""Config settings – HashingSettings.

Environment variables (all optional)::

    CREDKIT_PRODUCTION=true             # production deployment flag
    CREDKIT_BCRYPT_ROUNDS=10            # base cost factor
    CREDKIT_PRODUCTION_ROUNDS_OFFSET=2  # added to the base in production
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable

from credkit.config.settings.base import Settings
from credkit.config.validation import InvalidSettingValueError

# bcrypt accepts log2 rounds in this range only.
MIN_ROUNDS = 4
MAX_ROUNDS = 31


@dataclasses.dataclass
class HashingSettings(Settings):
    """Cost-factor configuration for password hashing."""

    _prefix: dataclasses.ClassVar[str] = "CREDKIT"

    production: bool = False
    bcrypt_rounds: int = 10
    production_rounds_offset: int = 2

    def _validate(self) -> None:
        if self.production_rounds_offset < 1:
            raise InvalidSettingValueError(
                "production_rounds_offset",
                self.production_rounds_offset,
                "production must cost strictly more than non-production",
            )
        for production in (False, True):
            rounds = self._rounds_for(production)
            if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
                raise InvalidSettingValueError(
                    "bcrypt_rounds",
                    self.bcrypt_rounds,
                    f"effective rounds {rounds} outside {MIN_ROUNDS}..{MAX_ROUNDS}",
                )

    def _rounds_for(self, production: bool) -> int:
        if production:
            return self.bcrypt_rounds + self.production_rounds_offset
        return self.bcrypt_rounds

    def cost_factor(self) -> int:
        """Effective bcrypt rounds for the current deployment."""
        return self._rounds_for(self.production)


SettingsProvider = Callable[[], HashingSettings]


def load_hashing_settings() -> HashingSettings:
    """Read :class:`HashingSettings` from the environment, fresh on each call."""
    return HashingSettings.load()


__all__ = [
    "HashingSettings",
    "MAX_ROUNDS",
    "MIN_ROUNDS",
    "SettingsProvider",
    "load_hashing_settings",
]
