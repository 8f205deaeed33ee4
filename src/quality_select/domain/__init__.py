"""Domain types for quality-select.

Values (numbers and the wildcard) and the validated request/result models.
"""

from quality_select.domain.request import SelectionRequest, SelectionResult, is_ascending
from quality_select.domain.value import (
    ANY,
    AnyValue,
    Number,
    Value,
    contains_any,
    format_values,
    parse_value,
    parse_value_list,
)

__all__ = [
    "ANY",
    "AnyValue",
    "Number",
    "Value",
    "contains_any",
    "format_values",
    "parse_value",
    "parse_value_list",
    "SelectionRequest",
    "SelectionResult",
    "is_ascending",
]
