"""Application query – Where filter descriptor and its JSON wire format."""
from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any

from generic_sqla.kernel.errors import ValidationError

_TRUE_STRINGS = frozenset({"1", "true"})


class WhereMode(str, Enum):
    EQUALS = "equals"
    LIKE = "like"
    FULL_TEXT_SEARCH = "full_text_search"


def parse_flag(raw: Any) -> bool:
    """Normalise a wire flag: ``True``, ``"1"`` and ``"true"`` are true, anything else false."""
    if isinstance(raw, bool):
        return raw
    return isinstance(raw, str) and raw in _TRUE_STRINGS


@dataclasses.dataclass(frozen=True)
class Where:
    """One predicate on a column: ``name <mode> value``.

    * ``EQUALS`` renders ``name = :value``.
    * ``LIKE`` renders ``name LIKE :value`` with the value bound as ``%value%``.
    * ``FULL_TEXT_SEARCH`` renders the dialect's full-text match, e.g.
      ``MATCH (name) AGAINST (:value IN BOOLEAN MODE)`` on MySQL. Create a
      FULLTEXT index on the column for this to be usable.

    Several ``Where`` values passed together are AND-ed in the given order.
    """

    name: str
    value: Any
    mode: WhereMode = WhereMode.EQUALS

    def __post_init__(self) -> None:
        if not isinstance(self.mode, WhereMode):
            object.__setattr__(self, "mode", WhereMode(self.mode))

    @classmethod
    def equals(cls, name: str, value: Any) -> "Where":
        return cls(name, value, WhereMode.EQUALS)

    @classmethod
    def like(cls, name: str, value: Any) -> "Where":
        return cls(name, value, WhereMode.LIKE)

    @classmethod
    def full_text(cls, name: str, value: Any) -> "Where":
        return cls(name, value, WhereMode.FULL_TEXT_SEARCH)

    @property
    def is_like(self) -> bool:
        return self.mode is WhereMode.LIKE

    @property
    def is_full_text_search(self) -> bool:
        return self.mode is WhereMode.FULL_TEXT_SEARCH

    @property
    def bound_value(self) -> Any:
        if self.is_like:
            return f"%{self.value}%"
        return self.value

    def clause(self, column: Any) -> Any:
        """Build the SQLAlchemy boolean expression for *column*."""
        if self.is_full_text_search:
            return column.match(self.bound_value)
        if self.is_like:
            return column.like(self.bound_value)
        return column == self.bound_value

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Where":
        """Build a filter from its wire form.

        When both ``is_full_text_search`` and ``is_like`` are set, full-text
        wins and the value is bound as given, without ``%`` wrapping.
        """
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ValidationError(
                "Where payload must be an object with a string 'name'",
                errors=[{"field": "name", "value": data}],
            )
        mode = WhereMode.EQUALS
        if parse_flag(data.get("is_full_text_search")):
            mode = WhereMode.FULL_TEXT_SEARCH
        elif parse_flag(data.get("is_like")):
            mode = WhereMode.LIKE
        return cls(name=data["name"], value=data.get("value"), mode=mode)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "is_like": self.is_like,
            "is_full_text_search": self.is_full_text_search,
            "value": self.value,
        }


def wheres_from_json(payload: str | bytes) -> list[Where]:
    """Decode a JSON array of filter objects."""
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValidationError("Expected a JSON array of filters")
    return [Where.from_dict(item) for item in data]


__all__ = ["Where", "WhereMode", "parse_flag", "wheres_from_json"]
