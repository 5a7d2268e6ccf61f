"""Observability – structured logging helpers."""
from seat_reservations.observability.logging.factory import LoggerFactory
from seat_reservations.observability.logging.logger import get_logger

__all__ = [
    "LoggerFactory",
    "get_logger",
]
