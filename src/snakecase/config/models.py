"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, snakecase.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class CheckConfig(BaseModel):
    """[check] section — how ``snakecase check`` reads its input."""

    model_config = {"frozen": True}

    fail_fast: bool = False
    strip_whitespace: bool = True
    skip_blank: bool = True
    comment_prefix: str = "#"
