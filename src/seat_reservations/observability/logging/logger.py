"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name*, with *initial_values* already bound.

    Module-level loggers stay lazy until first use, so they pick up whatever
    :meth:`LoggerFactory.configure` set up.
    """
    bound = structlog.get_logger(name)
    return bound.bind(**initial_values) if initial_values else bound


__all__ = ["get_logger"]
