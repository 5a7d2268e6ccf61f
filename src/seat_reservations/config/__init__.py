"""Config – 12-factor settings read from the environment."""

from seat_reservations.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from seat_reservations.config.loaders import EnvSettingsLoader, SettingsLoader
from seat_reservations.config.reservation import ReservationSettings
from seat_reservations.config.settings import Settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ReservationSettings",
    "Settings",
    "SettingsLoader",
]
