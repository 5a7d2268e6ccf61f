"""Observability – structured logging."""
from seat_reservations.observability.logging import LoggerFactory, get_logger

__all__ = ["LoggerFactory", "get_logger"]
