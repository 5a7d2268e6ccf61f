"""Config – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from seat_reservations.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from seat_reservations.config.settings import Settings

S = TypeVar("S", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is not dataclasses.MISSING
        or field.default_factory is not dataclasses.MISSING
    )


def _type_name(type_hint: Any) -> str:
    # Annotations are strings under ``from __future__ import annotations``.
    if isinstance(type_hint, str):
        return type_hint.split("[", 1)[0]
    return getattr(type_hint, "__origin__", type_hint).__name__


class SettingsLoader(abc.ABC):
    """Port: build a settings object from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Reads ``<PREFIX>_<FIELD>`` variables from *environ* (default :data:`os.environ`).

    Values are coerced by the declared field type: ``bool``, ``int``,
    ``float`` and comma-separated ``list``; anything else stays a string.
    Unset variables fall back to the field default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[S]) -> S:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = self._coerce(key, raw, _type_name(field.type))

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc

    @staticmethod
    def _coerce(key: str, raw: str, type_name: str) -> Any:
        if type_name == "bool":
            lowered = raw.strip().lower()
            if lowered in _TRUTHY:
                return True
            if lowered in _FALSY:
                return False
            raise InvalidSettingValueError(key, raw, "expected a boolean")
        if type_name in ("int", "float"):
            try:
                return int(raw) if type_name == "int" else float(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, f"expected {type_name}") from exc
        if type_name == "list":
            return [item.strip() for item in raw.split(",") if item.strip()]
        return raw


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
