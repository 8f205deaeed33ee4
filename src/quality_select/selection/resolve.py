"""Entry point: filter by allowed, then select by preferred."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from quality_select.domain.request import SelectionRequest, SelectionResult
from quality_select.domain.value import Value
from quality_select.selection.allowed import filter_allowed
from quality_select.selection.preferred import find_preferred

logger = logging.getLogger(__name__)


def resolve(
    available: Sequence[int],
    allowed: Sequence[Value],
    preferred: Sequence[Value],
) -> list[int]:
    """Return the available values that are allowed and closest to the preferred ones.

    All three sequences must be sorted ascending; unsorted input gives an
    unspecified (but non-failing) result.

    Example:
        >>> from quality_select import Number
        >>> resolve([240, 360, 720], [Number(360), Number(720)], [Number(1080)])
        [720]
    """
    permitted = filter_allowed(available, allowed)
    selected = find_preferred(permitted, preferred)
    logger.debug(
        "Resolved %d available -> %d allowed -> %s", len(available), len(permitted), selected
    )
    return selected


def resolve_request(request: SelectionRequest) -> SelectionResult:
    """Resolve a validated request."""
    selected = resolve(request.available, request.allowed, request.preferred)
    return SelectionResult(request=request, selected=tuple(selected))
