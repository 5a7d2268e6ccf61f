"""Config – ReservationSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from seat_reservations.config.errors import InvalidSettingValueError
from seat_reservations.config.settings import Settings


@dataclasses.dataclass
class ReservationSettings(Settings):
    """Settings of a :class:`~seat_reservations.bootstrap.ReservationSystem`.

    Environment: ``SEAT_RESERVATIONS_LOG_LEVEL``, ``SEAT_RESERVATIONS_JSON_LOGS``,
    ``SEAT_RESERVATIONS_ENFORCE_EXPECTED_VERSION``.
    """

    _prefix: ClassVar[str] = "SEAT_RESERVATIONS"

    log_level: str = "INFO"
    json_logs: bool = True
    enforce_expected_version: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a standard logging level name"
            )

    @property
    def level(self) -> int:
        """Numeric ``logging`` level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)


__all__ = ["ReservationSettings"]
