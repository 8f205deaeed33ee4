"""Wildcard-aware value type.

A `Value` is either a concrete `Number` or the wildcard `ANY`, which matches
everything. The two variants never compare equal to each other or to bare
integers; ordering is only ever done on extracted integers.

Example:
    >>> parse_value_list("360, any")
    [Number(value=360), AnyValue()]
    >>> format_values([Number(360), ANY])
    '[ 360, `any`, ]'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from quality_select.errors import WildcardValueError

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_WILDCARD_TOKENS = frozenset({"any", "*"})


@dataclass(frozen=True)
class Number:
    """A concrete integer value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Number requires an int, got {type(self.value).__name__}")

    def is_any(self) -> bool:
        return False

    def assume_number(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AnyValue:
    """The wildcard: matches every number."""

    def is_any(self) -> bool:
        return True

    def assume_number(self) -> int:
        raise WildcardValueError()

    def __str__(self) -> str:
        return "`any`"


ANY = AnyValue()

Value = Union[Number, AnyValue]


def contains_any(values: Iterable[Value]) -> bool:
    """Return True if the wildcard appears anywhere in `values`."""
    return any(value == ANY for value in values)


def parse_value(raw: Value | int | str) -> Value:
    """Convert an int, a string token or an existing value into a `Value`.

    Strings may be a signed decimal integer or one of the wildcard tokens
    ("any", "*"), case-insensitive.

    Raises:
        ValueError: If `raw` is not a recognised value.
    """
    if isinstance(raw, (Number, AnyValue)):
        return raw
    if isinstance(raw, bool):
        raise ValueError(f"Invalid value {raw!r}: booleans are not numbers")
    if isinstance(raw, int):
        return Number(raw)
    if isinstance(raw, str):
        token = raw.strip()
        if token.lower() in _WILDCARD_TOKENS:
            return ANY
        if _INTEGER_RE.match(token):
            return Number(int(token))
        raise ValueError(f"Invalid value {raw!r}: expected an integer or 'any'")
    raise ValueError(f"Invalid value {raw!r}: expected an integer or 'any'")


def parse_value_list(text: str) -> list[Value]:
    """Parse a comma-separated list such as "240,360,any"."""
    if not text.strip():
        return []
    return [parse_value(item) for item in text.split(",")]


def format_values(values: Iterable[Value | int]) -> str:
    """Render values as `[ 240, 360, ]`."""
    return "[ " + "".join(f"{value}, " for value in values) + "]"
