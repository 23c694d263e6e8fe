"""Application query – filter, order and pagination descriptors."""
from generic_sqla.application.query.order import OrderBy, SortDirection, orders_from_json
from generic_sqla.application.query.paginator import DEFAULT_MAX_PAGE_SIZE, Paginator
from generic_sqla.application.query.where import Where, WhereMode, parse_flag, wheres_from_json

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "OrderBy",
    "Paginator",
    "SortDirection",
    "Where",
    "WhereMode",
    "orders_from_json",
    "parse_flag",
    "wheres_from_json",
]
