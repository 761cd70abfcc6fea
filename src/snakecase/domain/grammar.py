"""The snake_case grammar and its single error kind.

A valid string matches ``^[_a-z][_a-z0-9]*$``:
- Non-empty.
- Starts with a lowercase ASCII letter or underscore.
- Contains only lowercase ASCII letters, digits, and underscores.

INVARIANT: This module is the single source of truth for the grammar.
Both string variants in :mod:`snakecase.domain.strings` validate through
:func:`is_snake_case` and nothing else.
"""

from __future__ import annotations

import re
from typing import Any, Final

SNAKE_CASE_PATTERN: Final[str] = r"^[_a-z][_a-z0-9]*$"

# fullmatch on the bare classes: "$" would also accept a trailing newline.
_SNAKE_CASE_RE: Final[re.Pattern[str]] = re.compile(r"[_a-z][_a-z0-9]*")


class InvalidSnakeCase(ValueError):
    """The given text is not valid snake_case.

    Carries no payload. Callers that need the offending text keep their own
    reference to it.
    """

    def __init__(self) -> None:
        super().__init__("not a valid snake_case string")


def is_snake_case(text: Any) -> bool:
    """Check whether *text* is a non-empty snake_case string.

    Total: never raises. Anything that is not a ``str`` is rejected, as is
    any non-ASCII character.

    Examples:
        >>> is_snake_case("_hello42")
        True
        >>> is_snake_case("_")
        True
        >>> is_snake_case("42abc")
        False
        >>> is_snake_case("")
        False
    """
    if not isinstance(text, str):
        return False
    return _SNAKE_CASE_RE.fullmatch(text) is not None
