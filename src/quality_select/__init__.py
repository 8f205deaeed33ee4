"""quality-select: pick a quality level from what is available, allowed and preferred.

Example:
    >>> from quality_select import ANY, Number, resolve
    >>> resolve([240, 360, 720], [Number(360), ANY], [Number(360), Number(720)])
    [360, 720]
"""

from quality_select.domain import (
    ANY,
    AnyValue,
    Number,
    SelectionRequest,
    SelectionResult,
    Value,
    format_values,
    parse_value,
    parse_value_list,
)
from quality_select.errors import ErrorEnvelope, ErrorType, WildcardValueError, make_error
from quality_select.selection import filter_allowed, find_preferred, resolve, resolve_request

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # values
    "ANY",
    "AnyValue",
    "Number",
    "Value",
    "format_values",
    "parse_value",
    "parse_value_list",
    # models
    "SelectionRequest",
    "SelectionResult",
    # selection
    "filter_allowed",
    "find_preferred",
    "resolve",
    "resolve_request",
    # errors
    "ErrorEnvelope",
    "ErrorType",
    "WildcardValueError",
    "make_error",
]
