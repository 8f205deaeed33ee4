"""Tests for quality_select.selection.resolve."""

from __future__ import annotations

import pytest

from quality_select import ANY, Number, SelectionRequest, resolve, resolve_request
from quality_select.selection.allowed import filter_allowed
from quality_select.selection.preferred import find_preferred

SCENARIOS = [
    ([240, 360, 720], [Number(360), Number(720)], [Number(1080)], [720]),
    ([240, 720], [Number(360), Number(720)], [Number(1080)], [720]),
    ([240], [Number(360), Number(720)], [Number(1080)], []),
    (
        [240, 360, 720],
        [Number(240), Number(360), Number(720), Number(1080)],
        [Number(240), Number(360)],
        [240, 360],
    ),
    ([240, 360, 720], [Number(360), ANY], [Number(360), Number(720)], [360, 720]),
    ([240, 360, 720], [Number(1080)], [ANY, Number(720)], []),
    (
        [240, 720],
        [Number(240), Number(360), Number(720), Number(1080)],
        [Number(240), Number(360)],
        [240, 720],
    ),
    ([240, 720], [Number(240), Number(360), Number(1080)], [Number(240), Number(360)], [240]),
    ([720], [Number(240), Number(360), Number(1080)], [Number(240), Number(360)], []),
    ([240, 360], [Number(240), Number(360)], [Number(720), Number(1080)], [360]),
    (
        [240, 360, 720],
        [Number(240), Number(360), Number(720)],
        [ANY, Number(720)],
        [240, 360, 720],
    ),
    ([240, 360, 720], [Number(360), Number(1080)], [ANY, Number(720)], [360]),
]


@pytest.mark.parametrize(("available", "allowed", "preferred", "expected"), SCENARIOS)
def test_resolve_scenarios(available, allowed, preferred, expected) -> None:
    assert resolve(available, allowed, preferred) == expected


def test_resolve_is_filter_then_select() -> None:
    available = [144, 240, 360, 480, 720, 1080]
    allowed = [Number(240), Number(480), Number(720)]
    preferred = [Number(300), Number(1000)]
    expected = find_preferred(filter_allowed(available, allowed), preferred)
    assert resolve(available, allowed, preferred) == expected == [480, 720]


def test_resolve_is_deterministic() -> None:
    args = ([240, 360, 720], [Number(360), ANY], [Number(500)])
    assert resolve(*args) == resolve(*args) == [720]


def test_resolve_does_not_mutate_inputs() -> None:
    available = [240, 360, 720]
    allowed = [ANY]
    preferred = [ANY]
    resolve(available, allowed, preferred).append(1080)
    assert available == [240, 360, 720]


def test_empty_available_gives_empty_result() -> None:
    assert resolve([], [ANY], [ANY]) == []
    assert resolve([], [Number(360)], [Number(720)]) == []


def test_accepts_tuples() -> None:
    assert resolve((240, 360), (ANY,), (Number(300),)) == [360]


def test_resolve_request_wraps_result() -> None:
    request = SelectionRequest.model_validate(
        {"available": [240, 360, 720], "allowed": [360, 720], "preferred": [1080]}
    )
    result = resolve_request(request)
    assert result.request == request
    assert result.selected == (720,)
