"""Pick the available value closest to each preference.

For every preferred number the smallest available value that meets or exceeds
it wins. When the preference is above everything on offer, the largest
available value is used instead, so an unreachable preference still degrades
to the best value there is.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Sequence
from itertools import groupby

from quality_select.domain.value import Value, contains_any

logger = logging.getLogger(__name__)


def find_preferred(available: Sequence[int], preferred: Sequence[Value]) -> list[int]:
    """Return the available values closest to the preferred ones.

    Both sequences must be sorted ascending. If `preferred` contains the
    wildcard, all available values are returned.

    Args:
        available: Candidate values, ascending.
        preferred: Desired values or the wildcard, ascending.

    Returns:
        One selection per preferred value, in preference order, with
        adjacent repeats collapsed. Empty if `available` is empty.

    Example:
        >>> from quality_select import Number
        >>> find_preferred([240, 360, 1080], [Number(360), Number(720)])
        [360, 1080]
    """
    if contains_any(preferred):
        logger.debug("Wildcard in preferred, returning all %d available values", len(available))
        return list(available)

    selected: list[int] = []
    for value in preferred:
        target = value.assume_number()
        if not available:
            continue
        index = bisect_left(available, target)
        if index == len(available):
            index -= 1
            logger.debug(
                "No available value >= %d, falling back to %d", target, available[index]
            )
        selected.append(available[index])

    return [key for key, _ in groupby(selected)]
