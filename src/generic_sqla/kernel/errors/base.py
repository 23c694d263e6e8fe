"""Root error class for the generic-sqla error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error generic-sqla raises on its own.

    Failures coming from SQLAlchemy or the database driver are never
    wrapped; only conditions the library detects itself (bad input,
    missing capability, bad configuration) derive from here.

    Args:
        message: Human-readable description.
        code: Stable slug for programmatic handling (defaults to ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_code: str = "generic_sqla_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for HTTP error bodies."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs merged into a structured log event for this error."""
        fields: dict[str, Any] = {"error_code": self.code}
        if self.detail:
            fields["error_detail"] = self.detail
        return fields


__all__ = ["BaseError"]
