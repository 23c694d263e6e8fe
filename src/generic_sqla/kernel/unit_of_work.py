"""Unit of Work port – transactional boundary shared by repositories."""

from __future__ import annotations

import abc
from typing import Any


class UnitOfWork(abc.ABC):
    """Port: one transaction that several repositories write through.

    Used as an async context manager: leaving the block normally commits,
    leaving it with an exception rolls back. Repositories obtained from
    :meth:`repository` never commit on their own.
    """

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...

    @abc.abstractmethod
    def repository(self, model: type[Any]) -> Any:
        """Return a repository for *model* bound to this unit of work."""

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()


__all__ = ["UnitOfWork"]
