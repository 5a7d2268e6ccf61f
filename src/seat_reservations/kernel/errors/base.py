"""Root error class for the seat_reservations error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a human-readable ``message``, a machine-readable
    ``code`` and a ``detail`` dict made of the extra keyword arguments it was
    raised with::

        raise ConflictError("seat already taken", seat=3)   # detail == {"seat": 3}

    Chain underlying exceptions with ``raise ... from exc``.
    """

    default_code: str = "error"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail

    def __str__(self) -> str:
        """Single-line JSON, safe to embed in a log line."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
