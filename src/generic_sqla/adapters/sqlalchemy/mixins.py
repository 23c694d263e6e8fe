"""SQLAlchemy ORM mixins – EntityMixin, TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class EntityMixin:
    """Implements :class:`~generic_sqla.kernel.entity.TablerWithPrimaryKey` from the mapping.

    Mix into any declarative model to make it usable with
    :class:`~generic_sqla.adapters.sqlalchemy.repository.SqlAlchemyRepository`::

        class User(EntityMixin, Base):
            __tablename__ = "users"
            id: Mapped[int] = mapped_column(primary_key=True)

    Composite keys report their first column.
    """

    @classmethod
    def table_name(cls) -> str:
        return cls.__table__.name  # type: ignore[attr-defined]

    @classmethod
    def primary_key_name(cls) -> str:
        return next(iter(cls.__table__.primary_key.columns)).name  # type: ignore[attr-defined]


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` timestamp columns.

    Both default to the current time on the *database* server, so they are
    populated on the row returned by ``create``. ``updated_at`` is refreshed
    on every ORM UPDATE via ``onupdate=func.now()``.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


__all__ = ["EntityMixin", "TimestampMixin"]
