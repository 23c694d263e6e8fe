"""SQLAlchemy adapter – Association handle over one relationship of one instance."""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from sqlalchemy import func, inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, with_parent

from generic_sqla.adapters.sqlalchemy.columns import order_clauses, where_clauses
from generic_sqla.application.query import OrderBy, Where
from generic_sqla.kernel.errors import UnknownAssociationError, ValidationError


def _as_list(values: Any) -> list[Any]:
    if values is None:
        return []
    if isinstance(values, (list, tuple, set, frozenset)):
        return list(values)
    return [values]


class Association:
    """Manipulate the related records behind ``instance.<field>``.

    The field must be a ``relationship()`` declared on the instance's
    mapper; the mapper's relationship registry is the only lookup, so a
    plain column or a misspelt name raises :class:`UnknownAssociationError`.

    Collections (one-to-many, many-to-many) accept one or many values;
    scalar relationships (one-to-one, many-to-one) accept a single value.
    Removing a record from the set follows the relationship's cascade:
    the foreign key is nulled, or the row is deleted with
    ``delete-orphan``.

    Mutations run through :meth:`AsyncSession.run_sync` so lazy
    collections can be loaded, then flush; committing is left to the
    owner of the session.
    """

    def __init__(self, session: AsyncSession, instance: Any, field: str) -> None:
        mapper = sa_inspect(type(instance), raiseerr=False)
        relationship = mapper.relationships.get(field) if mapper is not None else None
        if relationship is None:
            raise UnknownAssociationError(type(instance).__name__, field)
        self._session = session
        self._instance = instance
        self._field = field
        self._relationship = relationship

    @property
    def field(self) -> str:
        return self._field

    @property
    def uselist(self) -> bool:
        return bool(self._relationship.uselist)

    @property
    def target(self) -> type:
        return self._relationship.mapper.class_

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def append(self, values: Any) -> None:
        items = self._checked(values)

        def _append(session: Session) -> None:
            session.add(self._instance)
            if self.uselist:
                collection = getattr(self._instance, self._field)
                for item in items:
                    if item not in collection:
                        _add(collection, item)
            elif items:
                setattr(self._instance, self._field, items[0])
            session.flush()

        await self._session.run_sync(_append)

    async def replace(self, values: Any) -> None:
        items = self._checked(values)

        def _replace(session: Session) -> None:
            session.add(self._instance)
            if self.uselist:
                current = getattr(self._instance, self._field)
                setattr(self._instance, self._field, set(items) if isinstance(current, set) else items)
            else:
                getattr(self._instance, self._field)
                setattr(self._instance, self._field, items[0] if items else None)
            session.flush()

        await self._session.run_sync(_replace)

    async def delete(self, values: Any) -> None:
        items = self._checked(values)

        def _delete(session: Session) -> None:
            session.add(self._instance)
            if self.uselist:
                collection = getattr(self._instance, self._field)
                for item in items:
                    if item in collection:
                        collection.remove(item)
            elif getattr(self._instance, self._field) in items:
                setattr(self._instance, self._field, None)
            session.flush()

        await self._session.run_sync(_delete)

    async def clear(self) -> None:
        def _clear(session: Session) -> None:
            session.add(self._instance)
            if self.uselist:
                current = getattr(self._instance, self._field)
                setattr(self._instance, self._field, set() if isinstance(current, set) else [])
            else:
                getattr(self._instance, self._field)
                setattr(self._instance, self._field, None)
            session.flush()

        await self._session.run_sync(_clear)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def count(self) -> int:
        stmt = (
            select(func.count())
            .select_from(self.target)
            .where(with_parent(self._instance, self._attribute))
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def find(self, wheres: Sequence[Where] = (), orders: Sequence[OrderBy] = ()) -> list[Any]:
        table = self._relationship.mapper.local_table
        stmt = select(self.target).where(with_parent(self._instance, self._attribute))
        stmt = stmt.where(*where_clauses(table, wheres))
        ordering = order_clauses(table, orders)
        if ordering:
            stmt = stmt.order_by(*ordering)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    # ------------------------------------------------------------------

    @property
    def _attribute(self) -> Any:
        return getattr(type(self._instance), self._field)

    def _checked(self, values: Any) -> list[Any]:
        items = _as_list(values)
        if not self.uselist and len(items) > 1:
            raise ValidationError(
                f"Association '{self._field}' holds a single record, got {len(items)}"
            )
        return items


def _add(collection: Iterable[Any], item: Any) -> None:
    if isinstance(collection, set):
        collection.add(item)
    else:
        collection.append(item)  # type: ignore[attr-defined]


__all__ = ["Association"]
