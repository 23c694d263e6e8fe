"""Infrastructure errors – capabilities the configured store does not offer."""

from __future__ import annotations

from typing import Any

from generic_sqla.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure failure that is not a caller mistake.

    Errors raised by the database driver or by SQLAlchemy itself are
    never wrapped in this class; they reach the caller unchanged.
    """

    default_code = "infrastructure_error"


class UnsupportedDialectError(InfrastructureError):
    """The SQL dialect has no form for the requested statement."""

    default_code = "unsupported_dialect"

    def __init__(self, dialect: str, operation: str, **kwargs: Any) -> None:
        super().__init__(
            f"Dialect '{dialect}' does not support {operation}",
            detail={"dialect": dialect, "operation": operation},
            **kwargs,
        )
        self.dialect = dialect
        self.operation = operation


__all__ = ["InfrastructureError", "UnsupportedDialectError"]
