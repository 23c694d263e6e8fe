"""Kernel – entity contract, unit of work port and error hierarchy."""

from generic_sqla.kernel.entity import PkType, TablerWithPrimaryKey, TEntity
from generic_sqla.kernel.unit_of_work import UnitOfWork

__all__ = ["PkType", "TEntity", "TablerWithPrimaryKey", "UnitOfWork"]
