"""Config settings – Settings base class and DatabaseSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from generic_sqla.application.query.paginator import DEFAULT_MAX_PAGE_SIZE
from generic_sqla.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DatabaseSettings(Settings):
    """Engine and repository settings, read from ``DATABASE_*`` variables.

    ``url`` is any SQLAlchemy async URL, e.g.
    ``postgresql+asyncpg://user:pw@host/db`` or ``sqlite+aiosqlite:///app.db``.
    """

    _prefix: ClassVar[str] = "DATABASE"

    url: str
    echo: bool = False
    pool_pre_ping: bool = True
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE

    def _validate(self) -> None:
        if not self.url:
            raise InvalidSettingValueError("url", self.url, "must not be empty")
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")


__all__ = ["DatabaseSettings", "Settings"]
