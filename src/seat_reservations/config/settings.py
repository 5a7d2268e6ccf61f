"""Config – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import ClassVar, TypeVar

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass base for 12-factor settings.

    Each field maps to the environment variable ``<_prefix>_<FIELD>``.
    Subclasses validate themselves in :meth:`_validate`, which runs on
    every construction, whether from code or from the environment.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to normalise values and reject invalid ones."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls: type[S], environ: Mapping[str, str] | None = None) -> S:
        """Shorthand for ``EnvSettingsLoader(environ).load(cls)``."""
        from seat_reservations.config.loaders import EnvSettingsLoader

        return EnvSettingsLoader(environ).load(cls)


__all__ = ["Settings"]
