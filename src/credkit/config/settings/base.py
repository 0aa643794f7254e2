"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from credkit.config.settings.loaders import SettingsLoader

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare their fields as dataclass fields and set ``_prefix``
    to namespace their environment variables.  Cross-field rules go in
    :meth:`_validate`, which runs on every construction, including each
    reload from the environment.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def load(cls: type[S], loader: SettingsLoader | None = None) -> S:
        """Build a fresh instance from *loader* (environment by default)."""
        from credkit.config.settings.loaders import EnvSettingsLoader

        return (loader or EnvSettingsLoader()).load(cls)


__all__ = ["Settings"]
