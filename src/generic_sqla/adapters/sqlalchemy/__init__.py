"""SQLAlchemy adapter – generic repository, associations, sessions, unit of work."""
from generic_sqla.adapters.sqlalchemy.association import Association
from generic_sqla.adapters.sqlalchemy.mixins import EntityMixin, TimestampMixin
from generic_sqla.adapters.sqlalchemy.repository import ListCustomCallback, SqlAlchemyRepository
from generic_sqla.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from generic_sqla.adapters.sqlalchemy.upsert import build_upsert
from generic_sqla.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork

__all__ = [
    "Association",
    "EntityMixin",
    "ListCustomCallback",
    "SqlAlchemyRepository",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "TimestampMixin",
    "build_upsert",
]
