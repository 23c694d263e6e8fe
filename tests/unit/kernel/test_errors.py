"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from generic_sqla.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidFieldError,
    InvalidPaginationError,
    UnknownAssociationError,
    UnsupportedDialectError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("x").code == "generic_sqla_error"

    def test_custom_code(self) -> None:
        assert BaseError("x", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom", detail={"k": 1})))
        assert payload == {"code": "generic_sqla_error", "message": "boom", "detail": {"k": 1}}

    def test_empty_detail_omitted(self) -> None:
        assert BaseError("boom").to_dict() == {"code": "generic_sqla_error", "message": "boom"}

    def test_log_fields(self) -> None:
        assert BaseError("x", code="c").log_fields() == {"error_code": "c"}
        assert BaseError("x", detail={"k": 1}).log_fields()["error_detail"] == {"k": 1}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("low level")
        err = BaseError("high level", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()

    def test_repr(self) -> None:
        assert repr(DomainError("x")) == "DomainError(domain_error: x)"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            InvalidPaginationError(0, 10, 100),
            InvalidFieldError("a b"),
            UnknownAssociationError("User", "posts"),
        ],
    )
    def test_caller_errors_are_validation_errors(self, err: BaseError) -> None:
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)

    def test_unsupported_dialect_is_infrastructure(self) -> None:
        err = UnsupportedDialectError("mssql", "upsert")
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, DomainError)
        assert err.code == "unsupported_dialect"
        assert err.detail == {"dialect": "mssql", "operation": "upsert"}


class TestValidationErrors:
    def test_errors_serialized(self) -> None:
        err = ValidationError("bad", errors=[{"field": "x"}])
        assert err.to_dict()["errors"] == [{"field": "x"}]

    def test_pagination_lists_each_bad_field(self) -> None:
        err = InvalidPaginationError(0, 5000, 1000)
        assert [e["field"] for e in err.errors] == ["page", "page_size"]
        assert err.code == "invalid_pagination"

    def test_pagination_only_page_size(self) -> None:
        err = InvalidPaginationError(2, 0, 1000)
        assert [e["field"] for e in err.errors] == ["page_size"]

    def test_invalid_field(self) -> None:
        err = InvalidFieldError("name; --")
        assert err.field == "name; --"
        assert err.code == "invalid_field"

    def test_unknown_association(self) -> None:
        err = UnknownAssociationError("User", "comments")
        assert err.entity == "User"
        assert err.field == "comments"
        assert "comments" in err.message
