"""Restrict available values to the allowed ones."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from quality_select.domain.value import Value, contains_any

logger = logging.getLogger(__name__)


def filter_allowed(available: Sequence[int], allowed: Sequence[Value]) -> list[int]:
    """Return the values present in both `available` and `allowed`.

    Both sequences must be sorted ascending. If `allowed` contains the
    wildcard, every available value is allowed.

    Args:
        available: Candidate values, ascending.
        allowed: Permitted values or the wildcard, ascending.

    Returns:
        The sorted intersection as a new list.

    Example:
        >>> from quality_select import Number
        >>> filter_allowed([240, 360, 720], [Number(360), Number(720)])
        [360, 720]
    """
    if contains_any(allowed):
        logger.debug("Wildcard in allowed, keeping all %d available values", len(available))
        return list(available)

    allowed_numbers = [value.assume_number() for value in allowed]
    result: list[int] = []
    i = j = 0
    # Merge walk: both sides are sorted, advance whichever is behind.
    while i < len(available) and j < len(allowed_numbers):
        candidate = available[i]
        permitted = allowed_numbers[j]
        if candidate < permitted:
            i += 1
        elif candidate > permitted:
            j += 1
        else:
            result.append(candidate)
            i += 1
            j += 1
    return result
