"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def _pre_chain() -> list[Any]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


class LoggerFactory:
    """Route structlog through a single stdlib root handler on stderr.

    Both structlog events and plain ``logging`` records are rendered by one
    ``ProcessorFormatter``: one JSON object per line, or the console format
    when *json_logs* is false.
    """

    @staticmethod
    def configure(level: int | str = logging.INFO, json_logs: bool = True) -> None:
        structlog.configure(
            processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        if json_logs:
            renderer: Any = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=_pre_chain(),
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )

        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)


__all__ = ["LoggerFactory"]
