"""Selection functions: allowed filter, preferred selector and their composition."""

from quality_select.selection.allowed import filter_allowed
from quality_select.selection.preferred import find_preferred
from quality_select.selection.resolve import resolve, resolve_request

__all__ = [
    "filter_allowed",
    "find_preferred",
    "resolve",
    "resolve_request",
]
