"""
generic_sqla – generic repository layer over SQLAlchemy.

Import path convention::

    from generic_sqla import OrderBy, SqlAlchemyRepository, Where
    from generic_sqla.adapters.sqlalchemy import SqlAlchemyUnitOfWork
    from generic_sqla.observability.logging import LoggerContext
"""

from generic_sqla.adapters.sqlalchemy import (
    Association,
    EntityMixin,
    SqlAlchemyRepository,
    SqlAlchemySessionFactory,
    SqlAlchemyUnitOfWork,
)
from generic_sqla.application.query import OrderBy, Paginator, SortDirection, Where, WhereMode

__version__ = "0.1.0"
__all__ = [
    "Association",
    "EntityMixin",
    "OrderBy",
    "Paginator",
    "SortDirection",
    "SqlAlchemyRepository",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "Where",
    "WhereMode",
    "__version__",
]
