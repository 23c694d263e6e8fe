"""Domain errors – caller misuse detected before reaching the store."""

from __future__ import annotations

from typing import Any

from generic_sqla.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request breaks a rule of the repository contract."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidPaginationError(ValidationError):
    """``page`` or ``page_size`` is out of range."""

    default_code = "invalid_pagination"

    def __init__(self, page: int, page_size: int, max_page_size: int) -> None:
        errors: list[dict[str, Any]] = []
        if page < 1:
            errors.append({"field": "page", "value": page, "rule": ">= 1"})
        if page_size < 1 or page_size > max_page_size:
            errors.append(
                {"field": "page_size", "value": page_size, "rule": f"between 1 and {max_page_size}"}
            )
        super().__init__(
            f"Invalid pagination: page={page}, page_size={page_size}",
            errors=errors,
            detail={"page": page, "page_size": page_size, "max_page_size": max_page_size},
        )
        self.page = page
        self.page_size = page_size


class InvalidFieldError(ValidationError):
    """A column name is not a plain or table-qualified SQL identifier."""

    default_code = "invalid_field"

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid field name {field!r}",
            errors=[{"field": field, "rule": "identifier or table.identifier"}],
            detail={"field": field},
            **kwargs,
        )
        self.field = field


class UnknownAssociationError(ValidationError):
    """The entity has no relationship with the requested name."""

    default_code = "unknown_association"

    def __init__(self, entity: str, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"{entity} has no association '{field}'",
            detail={"entity": entity, "field": field},
            **kwargs,
        )
        self.entity = entity
        self.field = field


__all__ = [
    "DomainError",
    "InvalidFieldError",
    "InvalidPaginationError",
    "UnknownAssociationError",
    "ValidationError",
]
