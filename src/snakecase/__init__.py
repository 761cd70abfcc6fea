"""snakecase — strings that are valid snake_case by construction."""

from snakecase.domain.grammar import SNAKE_CASE_PATTERN, InvalidSnakeCase, is_snake_case
from snakecase.domain.strings import SnakeCase, SnakeCaseRef, snake_case_lit

__version__ = "0.1.0"

__all__ = [
    "SNAKE_CASE_PATTERN",
    "InvalidSnakeCase",
    "SnakeCase",
    "SnakeCaseRef",
    "__version__",
    "is_snake_case",
    "snake_case_lit",
]
