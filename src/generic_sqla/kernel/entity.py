"""Entity contract – what the generic repository requires from a model type."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class TablerWithPrimaryKey(Protocol):
    """Port: a mapped entity type with a stable table and primary-key column.

    Both members are classmethods so the repository can ask the *type*
    before it has any row in hand.
    """

    @classmethod
    def table_name(cls) -> str: ...

    @classmethod
    def primary_key_name(cls) -> str: ...


TEntity = TypeVar("TEntity", bound=TablerWithPrimaryKey)

# Closed set of primary-key scalar kinds: text or (signed/unsigned) integer.
PkType = TypeVar("PkType", str, int)


__all__ = ["PkType", "TEntity", "TablerWithPrimaryKey"]
