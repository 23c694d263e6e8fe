"""SQLAlchemy adapter – SqlAlchemyUnitOfWork."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from generic_sqla.adapters.sqlalchemy.repository import SqlAlchemyRepository
from generic_sqla.application.query import DEFAULT_MAX_PAGE_SIZE
from generic_sqla.kernel.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One :class:`AsyncSession` and its transaction, opened per ``async with``.

    Repositories obtained from :meth:`repository` share the session, so
    everything they write commits or rolls back together. The session is
    closed on exit and the unit of work can be entered again::

        async with SqlAlchemyUnitOfWork(factory) as uow:
            users = uow.repository(User)
            await users.create(user)
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        *,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._factory = session_factory
        self._max_page_size = max_page_size
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work is not active; use 'async with'")
        return self._session

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self._session = self._factory()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            await super().__aexit__(exc_type, exc_val, exc_tb)
        finally:
            session, self._session = self._session, None
            if session is not None:
                await session.close()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    def repository(self, model: type[Any]) -> SqlAlchemyRepository[Any, Any]:
        return SqlAlchemyRepository(self.session, model, max_page_size=self._max_page_size)


__all__ = ["SqlAlchemyUnitOfWork"]
