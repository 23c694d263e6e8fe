"""SQLAlchemy adapter – resolve descriptor field names into column expressions."""
from __future__ import annotations

import re
from typing import Any, Iterable

from sqlalchemy import literal_column

from generic_sqla.application.query import OrderBy, Where
from generic_sqla.kernel.errors import InvalidFieldError

# ``column`` or ``table.column``; nothing else is ever spliced into SQL text.
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


def resolve_column(table: Any, name: str) -> Any:
    """Return ``table.c[name]``, or a literal column for joined/qualified names."""
    column = table.c.get(name) if isinstance(name, str) else None
    if column is not None:
        return column
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise InvalidFieldError(str(name))
    return literal_column(name)


def table_column(table: Any, name: str) -> Any:
    """Like :func:`resolve_column` but the column must belong to *table*."""
    column = table.c.get(name) if isinstance(name, str) else None
    if column is None:
        raise InvalidFieldError(str(name))
    return column


def where_clauses(table: Any, wheres: Iterable[Where]) -> list[Any]:
    return [w.clause(resolve_column(table, w.name)) for w in wheres]


def order_clauses(table: Any, orders: Iterable[OrderBy]) -> list[Any]:
    clauses = []
    for order in orders:
        if not order.is_valid:
            continue
        clauses.append(order.clause(resolve_column(table, order.field)))
    return clauses


__all__ = ["order_clauses", "resolve_column", "table_column", "where_clauses"]
