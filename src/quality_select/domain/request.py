"""Selection request and result models.

This module provides:
- SelectionRequest: validated inputs for one selection (sorted sequences)
- SelectionResult: a request together with the values it resolved to

The selection functions themselves trust their callers to pass sorted input.
These models are where that precondition is checked, so JSON payloads and CLI
arguments are rejected before they reach the core.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, field_serializer, field_validator

from quality_select.domain.value import Value, parse_value


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def is_ascending(numbers: Sequence[int]) -> bool:
    """Check that `numbers` is sorted ascending (equal neighbours allowed)."""
    return all(left <= right for left, right in zip(numbers, numbers[1:]))


def _json_value(value: Value) -> int | str:
    return "any" if value.is_any() else value.assume_number()


class SelectionRequest(FrozenModel):
    """Inputs for one selection.

    `allowed` and `preferred` accept integers, numeric strings and the
    wildcard token "any"; numbers in each sequence must be ascending.
    """

    available: tuple[StrictInt, ...]
    allowed: tuple[Value, ...]
    preferred: tuple[Value, ...]

    @field_validator("available")
    @classmethod
    def _check_available_sorted(cls, values: tuple[int, ...]) -> tuple[int, ...]:
        if not is_ascending(values):
            raise ValueError(f"available must be sorted ascending, got {list(values)}")
        return values

    @field_validator("allowed", "preferred", mode="before")
    @classmethod
    def _parse_values(cls, raw: Any) -> tuple[Value, ...]:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
            raise ValueError("expected a list of integers or 'any'")
        return tuple(parse_value(item) for item in raw)

    @field_validator("allowed", "preferred")
    @classmethod
    def _check_values_sorted(cls, values: tuple[Value, ...]) -> tuple[Value, ...]:
        numbers = [value.assume_number() for value in values if not value.is_any()]
        if not is_ascending(numbers):
            raise ValueError(f"numbers must be sorted ascending, got {numbers}")
        return values

    @field_serializer("allowed", "preferred")
    def _dump_values(self, values: tuple[Value, ...]) -> list[int | str]:
        return [_json_value(value) for value in values]


class SelectionResult(FrozenModel):
    """Outcome of resolving a SelectionRequest."""

    request: SelectionRequest
    selected: tuple[int, ...]
