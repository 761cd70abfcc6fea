"""Tests for ServiceResult, ServiceError, and payload contracts."""

import json

import pytest
from pydantic import ValidationError

from snakecase.services.contracts import CheckResultData, dump_validated
from snakecase.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 1})
        assert result.ok is True
        assert result.op == "check"
        assert result.data == {"count": 1}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_SNAKE_CASE", message="1 of 1 names are not snake_case")
        result = ServiceResult(ok=False, op="check", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_SNAKE_CASE"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 0}, meta={"duration_ms": 3})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"] == {"count": 0}
        assert parsed["meta"] == {"duration_ms": 3}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestCheckResultContract:
    def test_dump_validated_normalizes(self) -> None:
        data = dump_validated(
            CheckResultData,
            {
                "count": 1,
                "valid_count": 1,
                "invalid_count": 0,
                "items": [{"name": "a", "valid": True}],
                "path": "names.txt",
            },
        )
        assert data["items"] == [{"name": "a", "valid": True}]
        assert data["path"] == "names.txt"

    def test_missing_key_fails_fast(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(CheckResultData, {"count": 1, "items": []})
