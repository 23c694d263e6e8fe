"""Application query – OrderBy descriptor and SortDirection."""
from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any

from generic_sqla.kernel.errors import ValidationError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


_DIRECTIONS = frozenset(d.value for d in SortDirection)


@dataclasses.dataclass(frozen=True)
class OrderBy:
    """Single sort key.

    ``direction`` is kept as received from the caller; only the exact
    strings ``"asc"`` and ``"desc"`` produce an ORDER BY term, anything
    else renders empty and is skipped.
    """

    field: str
    direction: str = SortDirection.ASC.value

    def __post_init__(self) -> None:
        if isinstance(self.direction, SortDirection):
            object.__setattr__(self, "direction", self.direction.value)

    @property
    def is_valid(self) -> bool:
        return bool(self.field) and self.direction in _DIRECTIONS

    def __str__(self) -> str:
        if not self.is_valid:
            return ""
        return f"{self.field} {self.direction}"

    def clause(self, column: Any) -> Any | None:
        if not self.is_valid:
            return None
        if self.direction == SortDirection.DESC.value:
            return column.desc()
        return column.asc()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderBy":
        if not isinstance(data, dict):
            raise ValidationError("OrderBy payload must be an object")
        return cls(field=str(data.get("field") or ""), direction=str(data.get("direction") or ""))

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "direction": self.direction}


def orders_from_json(payload: str | bytes) -> list[OrderBy]:
    """Decode a JSON array of order objects."""
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValidationError("Expected a JSON array of orders")
    return [OrderBy.from_dict(item) for item in data]


__all__ = ["OrderBy", "SortDirection", "orders_from_json"]
