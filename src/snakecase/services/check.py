"""CheckService — batch validation of candidate snake_case names.

Follows the linter pattern: every candidate is reported, and the result
fails when any of them is invalid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from snakecase.domain.grammar import InvalidSnakeCase
from snakecase.domain.strings import SnakeCase
from snakecase.services.contracts import CheckResultData, dump_validated
from snakecase.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from snakecase.config.models import CheckConfig

logger = logging.getLogger(__name__)

ERR_INVALID = "INVALID_SNAKE_CASE"
ERR_NO_INPUT = "NO_INPUT"
ERR_FILE_NOT_FOUND = "FILE_NOT_FOUND"
ERR_INVALID_ENCODING = "INVALID_ENCODING"
ERR_READ_FAILED = "READ_FAILED"


class CheckService:
    """Validates candidate names against the snake_case grammar."""

    def __init__(self, config: CheckConfig) -> None:
        self._config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, names: Iterable[str]) -> ServiceResult:
        """Check every name in *names*, in order."""
        return self._summarize("check", list(names))

    def check_file(self, path: Path) -> ServiceResult:
        """Check the names listed in *path*, one per line."""
        op = "check_file"
        if not path.is_file():
            return _file_error(op, ERR_FILE_NOT_FOUND, f"No such file: {path}", path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            return _file_error(
                op, ERR_INVALID_ENCODING, f"Not valid UTF-8: {path}", path, position=exc.start
            )
        except OSError as exc:
            return _file_error(op, ERR_READ_FAILED, f"Cannot read {path}: {exc}", path)
        return self._summarize(op, list(self._candidates(text.splitlines())), path=str(path))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidates(self, lines: Iterable[str]) -> Iterator[str]:
        """Apply the [check] line rules to raw file lines."""
        prefix = self._config.comment_prefix
        for line in lines:
            if prefix and line.lstrip().startswith(prefix):
                continue
            if self._config.strip_whitespace:
                line = line.strip()
            if self._config.skip_blank and not line:
                continue
            yield line

    def _summarize(self, op: str, names: list[str], **extra: Any) -> ServiceResult:
        if not names:
            return ServiceResult(
                ok=False,
                op=op,
                data=dict(extra),
                error=ServiceError(code=ERR_NO_INPUT, message="No names to check"),
            )

        items: list[dict[str, Any]] = []
        invalid: list[str] = []
        for name in names:
            try:
                SnakeCase(name)
            except InvalidSnakeCase:
                items.append({"name": name, "valid": False})
                invalid.append(name)
                if self._config.fail_fast:
                    break
            else:
                items.append({"name": name, "valid": True})

        warnings: list[str] = []
        skipped = len(names) - len(items)
        if skipped:
            warnings.append(f"Stopped at first invalid name; {skipped} not checked")

        data = dump_validated(
            CheckResultData,
            {
                **extra,
                "count": len(items),
                "valid_count": len(items) - len(invalid),
                "invalid_count": len(invalid),
                "items": items,
            },
        )
        logger.debug(
            "%s: %d checked, %d invalid, %d skipped", op, len(items), len(invalid), skipped
        )

        if invalid:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code=ERR_INVALID,
                    message=f"{len(invalid)} of {len(items)} names are not snake_case",
                    detail={"invalid": invalid},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)


def _file_error(op: str, code: str, message: str, path: Path, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail={"path": str(path), **detail}),
    )
