"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from zaidctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"gender": "MALE"})
        assert result.ok is True
        assert result.op == "decode"
        assert result.data == {"gender": "MALE"}
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_13_DIGITS", message="Not 13 digits")
        result = ServiceResult(ok=False, op="decode", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_13_DIGITS"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="decode",
            data={"date_of_birth": "1980-01-01"},
            meta={"max_age": 100},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["date_of_birth"] == "1980-01-01"
        assert parsed["meta"]["max_age"] == 100
        assert set(parsed) == {"ok", "op", "data", "error", "meta"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
