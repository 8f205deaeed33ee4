"""Local error taxonomy for quality-select.

The selection core has no recoverable errors. Input problems are caught at the
boundary (request models, CLI) and reported through a small, stable error
enum/envelope that callers can translate into their own formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNSORTED_INPUT = "UNSORTED_INPUT"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


class WildcardValueError(AssertionError):
    """Raised when the wildcard is used where a concrete number is required.

    This is an internal invariant breach: selection code checks for the
    wildcard before extracting numbers, so callers never see it.
    """

    def __init__(self, message: str = "attempted to treat wildcard as a concrete number") -> None:
        super().__init__(message)
