"""Owning and borrowing snake_case string types.

Two storage strategies over the same grammar (see :mod:`snakecase.domain.grammar`):

- :class:`SnakeCase` owns its text. It is a ``str`` subclass, so it is the
  text: comparisons, hashing, ``json.dumps`` and every ``str`` API work
  unchanged.
- :class:`SnakeCaseRef` borrows text owned elsewhere. It keeps a reference
  to the caller's ``str`` object and never copies it.

INVARIANT: Neither type can hold text that fails the grammar. The public
constructors validate; the private ``_from_valid`` paths are only reached
from values that were already validated.

Both types compare, order, and hash exactly like the underlying text, so a
``set[SnakeCase]`` can be probed with a ``SnakeCaseRef`` or a plain ``str``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

from snakecase.domain.grammar import SNAKE_CASE_PATTERN, InvalidSnakeCase, is_snake_case

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

LITERAL_CACHE_SIZE = 1024


def _require_snake_case(value: str) -> str:
    """Deserialization check with a message that names the rejected text."""
    if not is_snake_case(value):
        msg = f"Expected snake_case, got '{value}'"
        raise ValueError(msg)
    return value


def _core_schema(
    cls: type, build: Callable[[str], Any], *converters: core_schema.CoreSchema
) -> core_schema.CoreSchema:
    """Read a string, validate it, then wrap it with *build*.

    Python input that is already an instance of *cls* passes through, and
    each schema in *converters* is tried before falling back to a string.
    """
    from_str = core_schema.no_info_after_validator_function(
        lambda value: build(_require_snake_case(value)),
        core_schema.str_schema(),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), *converters, from_str]
        ),
        serialization=core_schema.to_string_ser_schema(),
    )



def _json_schema(
    schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
) -> JsonSchemaValue:
    json_schema = handler(schema)
    json_schema["pattern"] = SNAKE_CASE_PATTERN
    return json_schema


# --- Owning variant ---


class SnakeCase(str):
    """An owning string that always matches ``^[_a-z][_a-z0-9]*$``.

    Construct with ``SnakeCase(text)``; raises :class:`InvalidSnakeCase` if
    *text* is not snake_case. *text* may also be a :class:`SnakeCaseRef`,
    which is copied without re-validation.

    Derived ``str`` operations (``upper()``, ``+``, slicing) return plain
    ``str``: only the constructor produces a ``SnakeCase``.

    Examples:
        >>> name = SnakeCase("_hello42")
        >>> name == "_hello42"
        True
        >>> name.borrow() == name
        True
    """

    __slots__ = ()

    def __new__(cls, text: str | SnakeCaseRef) -> SnakeCase:
        if isinstance(text, SnakeCaseRef):
            return cls._from_valid(text.as_str())
        if not is_snake_case(text):
            raise InvalidSnakeCase
        return cls._from_valid(text)

    @classmethod
    def _from_valid(cls, text: str) -> SnakeCase:
        return str.__new__(cls, text)

    def as_str(self) -> str:
        """Return the stored text. No copy: a ``SnakeCase`` is its own text."""
        return self

    def borrow(self) -> SnakeCaseRef:
        """Return a view over this value's storage."""
        return SnakeCaseRef._from_valid(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_ref = core_schema.no_info_after_validator_function(
            SnakeCaseRef.to_owned, core_schema.is_instance_schema(SnakeCaseRef)
        )
        return _core_schema(cls, cls._from_valid, from_ref)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return _json_schema(schema, handler)


# --- Borrowing variant ---


def _text_of(value: object) -> str | None:
    """Underlying text of a comparable operand, or None if not comparable."""
    if isinstance(value, SnakeCaseRef):
        return value.as_str()
    if isinstance(value, str):
        return value
    return None


class SnakeCaseRef:
    """A non-owning view of a ``str`` known to be snake_case.

    ``SnakeCaseRef(text)`` validates *text* and keeps a reference to that
    exact object (``ref.as_str() is text``). Copies of a view are the view
    itself. Immutable: attributes cannot be set or deleted.

    Compares, orders, and hashes like its text, against ``str``,
    :class:`SnakeCase`, and other views, in either operand order.
    """

    __slots__ = ("_text",)

    _text: str

    def __new__(cls, text: str | SnakeCaseRef) -> SnakeCaseRef:
        if isinstance(text, SnakeCaseRef):
            return text
        if not is_snake_case(text):
            raise InvalidSnakeCase
        return cls._from_valid(text)

    @classmethod
    def _from_valid(cls, text: str) -> SnakeCaseRef:
        ref = object.__new__(cls)
        object.__setattr__(ref, "_text", text)
        return ref

    def as_str(self) -> str:
        """Return the borrowed text object itself."""
        return self._text

    def to_owned(self) -> SnakeCase:
        """Copy the borrowed text into a new :class:`SnakeCase`."""
        return SnakeCase._from_valid(self._text)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> SnakeCaseRef:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> SnakeCaseRef:
        return self

    def __reduce__(self) -> tuple[type[SnakeCaseRef], tuple[str]]:
        return (type(self), (str(self._text),))

    # --- Text conformance ---

    def __str__(self) -> str:
        return str(self._text)

    def __repr__(self) -> str:
        return repr(str(self._text))

    def __format__(self, format_spec: str) -> str:
        return format(str(self._text), format_spec)

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, SnakeCaseRef):
            item = item.as_str()
        return item in self._text  # type: ignore[operator]

    def __hash__(self) -> int:
        return hash(self._text)

    def __eq__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text == text

    def __lt__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text < text

    def __le__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text <= text

    def __gt__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text > text

    def __ge__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text >= text

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _core_schema(cls, cls._from_valid)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return _json_schema(schema, handler)


@functools.lru_cache(maxsize=LITERAL_CACHE_SIZE)
def snake_case_lit(text: str) -> SnakeCaseRef:
    """Validated view for a fixed string, checked once per distinct literal.

    Meant for module-level constants, so a bad literal fails when the
    declaring module is imported::

        TABLE = snake_case_lit("my_little_snake")

    Raises:
        InvalidSnakeCase: If *text* is not snake_case. Failures are not cached.
    """
    return SnakeCaseRef(text)
