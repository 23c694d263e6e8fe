"""Application query – Paginator."""
from __future__ import annotations

import dataclasses
import math
from typing import Any

from generic_sqla.kernel.errors import InvalidPaginationError

DEFAULT_MAX_PAGE_SIZE = 1000


@dataclasses.dataclass
class Paginator:
    """Offset pagination bookkeeping returned next to a page of rows.

    ``page`` and ``per_page`` echo the request (1-indexed); ``total`` is
    the number of rows matching the filters, ignoring offset and limit.
    """

    page: int
    per_page: int
    total: int = 0

    @staticmethod
    def validate(page: int, page_size: int, max_page_size: int = DEFAULT_MAX_PAGE_SIZE) -> None:
        if page < 1 or page_size < 1 or page_size > max_page_size:
            raise InvalidPaginationError(page, page_size, max_page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page, "total": self.total}


__all__ = ["DEFAULT_MAX_PAGE_SIZE", "Paginator"]
