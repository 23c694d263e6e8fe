"""SQLAlchemy adapter – dialect-specific INSERT … ON CONFLICT statements.

Affected-row counts reported for the resulting statement differ per
dialect and are returned to callers untouched:

============  ==========  ===================  ====================
dialect       new row     conflict, changed    conflict, unchanged
============  ==========  ===================  ====================
sqlite        1           1                    1
postgresql    1           1                    1
mysql         1           2                    1 (FOUND_ROWS)
============  ==========  ===================  ====================

With no update columns the conflicting row is left alone and the
count is 0.
"""
from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.dialects import mysql, postgresql, sqlite

from generic_sqla.adapters.sqlalchemy.columns import table_column
from generic_sqla.kernel.errors import UnsupportedDialectError

_ON_CONFLICT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}
_ON_DUPLICATE_KEY_DIALECTS = frozenset({"mysql", "mariadb"})


def build_upsert(
    table: Any,
    values: dict[str, Any],
    update_columns: Sequence[str],
    dialect_name: str,
    conflict_target: Sequence[str] | None = None,
) -> Any:
    """Build a single-statement upsert of *values* into *table*.

    *conflict_target* names the unique columns the conflict is detected on
    (primary key by default); MySQL ignores it and reacts to any unique key.
    """
    updates = [table_column(table, name) for name in update_columns]

    insert_fn = _ON_CONFLICT_INSERTS.get(dialect_name)
    if insert_fn is not None:
        if conflict_target:
            index_elements = [table_column(table, name) for name in conflict_target]
        else:
            index_elements = list(table.primary_key.columns)
        stmt = insert_fn(table).values(values)
        if not updates:
            return stmt.on_conflict_do_nothing(index_elements=index_elements)
        return stmt.on_conflict_do_update(
            index_elements=index_elements,
            set_={column.key: stmt.excluded[column.key] for column in updates},
        )

    if dialect_name in _ON_DUPLICATE_KEY_DIALECTS:
        stmt = mysql.insert(table).values(values)
        if not updates:
            return stmt.prefix_with("IGNORE")
        return stmt.on_duplicate_key_update({column.key: stmt.inserted[column.key] for column in updates})

    raise UnsupportedDialectError(dialect_name, "upsert")


__all__ = ["build_upsert"]
