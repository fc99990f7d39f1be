"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from ddfinance_access.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
    UnknownPermissionError,
    ValidationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls, parent",
        [
            (DomainError, BaseError),
            (InvariantViolationError, DomainError),
            (ValidationError, DomainError),
            (UnknownPermissionError, ValidationError),
            (NotFoundError, DomainError),
            (ApplicationError, BaseError),
            (UnauthorizedError, ApplicationError),
            (ForbiddenError, ApplicationError),
        ],
    )
    def test_subclass(self, cls, parent) -> None:
        assert issubclass(cls, parent)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"
        assert ForbiddenError().code == "forbidden"

    def test_custom_code_and_detail(self) -> None:
        err = DomainError("bad", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "bad", "detail": {"k": 1}}

    def test_str_is_json(self) -> None:
        payload = json.loads(str(UnauthorizedError("who are you")))
        assert payload["code"] == "unauthorized"
        assert payload["message"] == "who are you"

    def test_cause_is_chained(self) -> None:
        cause = KeyError("x")
        err = InvariantViolationError("broken", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(NotFoundError("Client", 3)) == "NotFoundError(code='not_found', message=\"Client '3' not found\")"


class TestSpecificErrors:
    def test_forbidden_defaults(self) -> None:
        err = ForbiddenError()
        assert err.message == "Access denied"
        assert err.permission is None
        assert err.detail == {}

    def test_unknown_permission_errors_list(self) -> None:
        err = UnknownPermissionError("FLY")
        assert err.to_dict()["errors"] == [{"field": "permission", "value": "FLY"}]

    def test_not_found_without_identifier(self) -> None:
        assert NotFoundError("Employee").message == "Employee not found"


class TestStructuredFields:
    def test_forbidden_fields_are_top_level(self) -> None:
        body = ForbiddenError("no", permission="EDIT_CLIENT", resource="client:42").to_dict()
        assert body == {
            "code": "forbidden",
            "message": "no",
            "detail": {},
            "permission": "EDIT_CLIENT",
            "resource": "client:42",
        }

    def test_unset_fields_are_omitted(self) -> None:
        body = ForbiddenError(permission="VIEW_ACCOUNTS").to_dict()
        assert "resource" not in body

    def test_not_found_fields(self) -> None:
        body = NotFoundError("Investment", 12).to_dict()
        assert (body["resource"], body["identifier"]) == ("Investment", "12")

    def test_log_fields_are_flat(self) -> None:
        err = ForbiddenError(permission="EDIT_CLIENT", resource="client:42")
        assert err.log_fields() == {
            "error_code": "forbidden",
            "permission": "EDIT_CLIENT",
            "resource": "client:42",
        }

    def test_base_log_fields(self) -> None:
        assert UnauthorizedError("nobody").log_fields() == {"error_code": "unauthorized"}

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = DomainError("bad", detail=detail)
        err.detail["k"] = 2
        assert detail == {"k": 1}
