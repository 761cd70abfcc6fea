"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from snakecase.config.models import CheckConfig


class TestCheckConfig:
    def test_defaults(self) -> None:
        cfg = CheckConfig()
        assert cfg.fail_fast is False
        assert cfg.strip_whitespace is True
        assert cfg.skip_blank is True
        assert cfg.comment_prefix == "#"

    def test_frozen(self) -> None:
        cfg = CheckConfig()
        with pytest.raises(ValidationError):
            cfg.fail_fast = True  # type: ignore[misc]

    def test_model_copy_override(self) -> None:
        cfg = CheckConfig().model_copy(update={"fail_fast": True})
        assert cfg.fail_fast is True
        assert cfg.comment_prefix == "#"

    def test_sparse_override(self) -> None:
        """Only override fields you care about — rest keeps defaults."""
        cfg = CheckConfig.model_validate({"fail_fast": True})
        assert cfg.fail_fast is True
        assert cfg.skip_blank is True
