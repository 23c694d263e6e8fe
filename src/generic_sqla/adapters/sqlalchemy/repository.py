"""SQLAlchemy adapter – SqlAlchemyRepository, the generic entity repository."""
from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, inspect as sa_inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from generic_sqla.adapters.sqlalchemy.association import Association
from generic_sqla.adapters.sqlalchemy.columns import order_clauses, table_column, where_clauses
from generic_sqla.adapters.sqlalchemy.upsert import build_upsert
from generic_sqla.application.query import DEFAULT_MAX_PAGE_SIZE, OrderBy, Paginator, Where
from generic_sqla.kernel.entity import PkType, TEntity
from generic_sqla.kernel.errors import BaseError, ValidationError
from generic_sqla.observability.logging import get_logger_from_context

ListCustomCallback = Callable[[Select[Any]], Select[Any]]

F = TypeVar("F", bound=Callable[..., Any])


def _logged(func: F) -> F:
    """Log a failing repository call once through the context logger, then re-raise."""

    @functools.wraps(func)
    async def wrapper(self: "SqlAlchemyRepository[Any, Any]", *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, *args, **kwargs)
        except Exception as exc:
            extra = exc.log_fields() if isinstance(exc, BaseError) else {}
            get_logger_from_context().error(
                "repository_error",
                operation=func.__name__,
                table=self.table_name,
                error_type=type(exc).__name__,
                error=exc.message if isinstance(exc, BaseError) else str(exc),
                **extra,
            )
            raise

    return wrapper  # type: ignore[return-value]


class SqlAlchemyRepository(Generic[TEntity, PkType]):
    """Generic CRUD, filtering, pagination and association access for one entity.

    The repository is bound to a single :class:`AsyncSession` for its whole
    life: a plain session, or the session of a
    :class:`~generic_sqla.adapters.sqlalchemy.uow.SqlAlchemyUnitOfWork` when
    the work must be atomic. Writes are flushed, never committed.

    Single-row lookups return ``None`` when nothing matches. Every other
    failure is logged through :func:`get_logger_from_context` and re-raised
    as the store raised it.

    Usage::

        repo: SqlAlchemyRepository[User, int] = SqlAlchemyRepository(session, User)
        rows, paginator = await repo.list(
            1, 20,
            [OrderBy("created_at", "desc")],
            [Where.like("name", "ann"), Where("active", True)],
        )
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[TEntity],
        *,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._session = session
        self._model = model
        self._table = model.__table__  # type: ignore[attr-defined]
        self._mapper = sa_inspect(model)
        self._max_page_size = max_page_size

    @property
    def session(self) -> AsyncSession:
        """The raw session handle, for statements the repository does not cover."""
        return self._session

    @property
    def model(self) -> type[TEntity]:
        return self._model

    @property
    def table_name(self) -> str:
        return self._model.table_name()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @_logged
    async def detail(self, id: PkType) -> TEntity | None:
        pk = self._pk_column()
        stmt = select(self._model).where(pk == id).order_by(pk).limit(1)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    @_logged
    async def wheres(self, wheres: Sequence[Where]) -> TEntity | None:
        stmt = self._filtered(select(self._model), wheres)
        stmt = stmt.order_by(self._pk_column()).limit(1)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    @_logged
    async def wheres_list(self, orders: Sequence[OrderBy], wheres: Sequence[Where]) -> list[TEntity]:
        stmt = self._ordered(self._filtered(select(self._model), wheres), orders)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    @_logged
    async def list(
        self,
        page: int,
        page_size: int,
        orders: Sequence[OrderBy],
        wheres: Sequence[Where],
    ) -> tuple[list[TEntity], Paginator]:
        return await self._paginate(select(self._model), page, page_size, orders, wheres)

    @_logged
    async def list_custom(
        self,
        page: int,
        page_size: int,
        orders: Sequence[OrderBy],
        wheres: Sequence[Where],
        customizer: ListCustomCallback,
    ) -> tuple[list[TEntity], Paginator]:
        """Like :meth:`list`, with *customizer* applied to the base SELECT first.

        The callback receives ``select(model)`` and returns the statement to
        paginate, e.g. ``lambda q: q.join(Order).where(Order.paid.is_(True))``.
        Filters may then name joined columns as ``table.column``.
        """
        return await self._paginate(customizer(select(self._model)), page, page_size, orders, wheres)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @_logged
    async def create(self, row: TEntity) -> TEntity:
        self._session.add(row)
        await self._session.flush()
        await self._session.refresh(row, attribute_names=self._column_attribute_keys())
        return row

    @_logged
    async def create_multiple(self, rows: Sequence[TEntity]) -> tuple[list[TEntity], int]:
        if not rows:
            return [], 0
        self._session.add_all(rows)
        await self._session.flush()
        return list(rows), len(rows)

    @_logged
    async def update(self, row: TEntity, columns: Sequence[str] = ()) -> int:
        """Update *row* by its primary key.

        With *columns*, exactly those columns are written (``None`` included);
        otherwise every non-key column whose value is not ``None``.

        When *row* is loaded in this session its pending column edits are
        not flushed; afterwards they are reloaded from the store, so edits to
        columns that were not written are discarded.
        """
        pk = self._pk_column()
        state = sa_inspect(row)
        if columns:
            targets = [table_column(self._table, name) for name in columns]
            values = {column.key: self._value(row, column) for column in targets}
        else:
            values = {
                column.key: value
                for column in self._table.columns
                if not column.primary_key and (value := self._value(row, column)) is not None
            }
        if not values:
            return 0
        stmt = update(self._table).where(pk == self._value(row, pk)).values(values)
        with self._session.no_autoflush:
            result = await self._session.execute(stmt)
            if state.persistent and state.session is self._session.sync_session:
                pending = [key for key in self._column_attribute_keys() if state.attrs[key].history.has_changes()]
                if pending:
                    await self._session.refresh(row, attribute_names=pending)
        return result.rowcount

    @_logged
    async def update_where(self, wheres: Sequence[Where], values: dict[str, Any]) -> int:
        """Mass-update every row matching *wheres*; *values* is keyed by column name.

        At least one filter is required. Instances already loaded in the
        session keep their old values until refreshed.
        """
        if not wheres:
            raise ValidationError("update_where requires at least one filter")
        if not values:
            return 0
        assignments = {table_column(self._table, name).key: value for name, value in values.items()}
        stmt = update(self._table).where(*where_clauses(self._table, wheres)).values(assignments)
        result = await self._session.execute(stmt)
        return result.rowcount

    @_logged
    async def upsert(
        self,
        row: TEntity,
        conflict_columns: Sequence[str],
        conflict_target: Sequence[str] | None = None,
    ) -> int:
        """Insert *row*, or update *conflict_columns* of the existing row on conflict.

        Returns the driver's affected-row count unchanged; see
        :mod:`generic_sqla.adapters.sqlalchemy.upsert` for what each dialect
        reports. Instances already loaded in the session are not refreshed.
        """
        values = {
            column.key: value
            for column in self._table.columns
            if (value := self._value(row, column)) is not None
        }
        dialect = self._session.get_bind(mapper=self._mapper).dialect.name
        stmt = build_upsert(self._table, values, conflict_columns, dialect, conflict_target)
        result = await self._session.execute(stmt)
        return result.rowcount

    # ------------------------------------------------------------------
    # Associations
    # ------------------------------------------------------------------

    def association(self, model: TEntity, field: str) -> Association:
        return Association(self._session, model, field)

    @_logged
    async def append_association(self, model: TEntity, field: str, values: Any) -> None:
        await self.association(model, field).append(values)

    @_logged
    async def replace_association(self, model: TEntity, field: str, values: Any) -> None:
        await self.association(model, field).replace(values)

    @_logged
    async def delete_association(self, model: TEntity, field: str, values: Any) -> None:
        await self.association(model, field).delete(values)

    @_logged
    async def clear_association(self, model: TEntity, field: str) -> None:
        await self.association(model, field).clear()

    @_logged
    async def count_association(self, model: TEntity, field: str) -> int:
        return await self.association(model, field).count()

    @_logged
    async def find_association(
        self,
        model: TEntity,
        field: str,
        wheres: Sequence[Where] = (),
        orders: Sequence[OrderBy] = (),
    ) -> list[Any]:
        return await self.association(model, field).find(wheres, orders)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _paginate(
        self,
        stmt: Select[Any],
        page: int,
        page_size: int,
        orders: Sequence[OrderBy],
        wheres: Sequence[Where],
    ) -> tuple[list[TEntity], Paginator]:
        Paginator.validate(page, page_size, self._max_page_size)
        paginator = Paginator(page=page, per_page=page_size)

        stmt = self._ordered(self._filtered(stmt, wheres), orders)
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        paginator.total = int((await self._session.execute(count_stmt)).scalar_one())
        if paginator.total == 0:
            return [], paginator

        result = await self._session.execute(stmt.offset(paginator.offset).limit(page_size))
        return list(result.scalars().all()), paginator

    def _filtered(self, stmt: Select[Any], wheres: Sequence[Where]) -> Select[Any]:
        clauses = where_clauses(self._table, wheres)
        return stmt.where(*clauses) if clauses else stmt

    def _ordered(self, stmt: Select[Any], orders: Sequence[OrderBy]) -> Select[Any]:
        clauses = order_clauses(self._table, orders)
        return stmt.order_by(*clauses) if clauses else stmt

    def _pk_column(self) -> Any:
        return table_column(self._table, self._model.primary_key_name())

    def _value(self, row: TEntity, column: Any) -> Any:
        return getattr(row, self._mapper.get_property_by_column(column).key)

    def _column_attribute_keys(self) -> list[str]:
        return [prop.key for prop in self._mapper.column_attrs]


__all__ = ["ListCustomCallback", "SqlAlchemyRepository"]
