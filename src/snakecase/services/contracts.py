"""Typed payload contracts for service boundaries.

These models validate payload shapes before they leave the service layer
so key regressions fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class CheckItem(BaseModel):
    """One checked candidate name."""

    name: str
    valid: bool


class CheckResultData(BaseModel):
    """Payload contract for ``CheckService.check`` and ``check_file``."""

    model_config = ConfigDict(extra="allow")

    count: int
    valid_count: int
    invalid_count: int
    items: list[CheckItem]
