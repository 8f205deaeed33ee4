"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from quality_select.errors import ErrorEnvelope, ErrorType, WildcardValueError, make_error


class TestMakeError:
    """Tests for make_error / ErrorEnvelope."""

    def test_basic(self) -> None:
        env = make_error(ErrorType.UNSORTED_INPUT, "available must be sorted", field="available")
        assert env.type is ErrorType.UNSORTED_INPUT
        assert env.message == "available must be sorted"
        assert env.context == {"field": "available"}

    def test_envelope_is_frozen(self) -> None:
        env = make_error(ErrorType.INVALID_INPUT, "bad")
        with pytest.raises(Exception):
            env.message = "changed"  # type: ignore[misc]

    def test_json_dump_uses_plain_strings(self) -> None:
        env = make_error(ErrorType.INVALID_INPUT, "boom")
        assert env.model_dump(mode="json") == {
            "type": "INVALID_INPUT",
            "message": "boom",
            "context": {},
        }

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(Exception):
            ErrorEnvelope(type=ErrorType.INVALID_INPUT, message="x", unexpected=1)  # type: ignore[call-arg]


class TestWildcardValueError:
    """Tests for WildcardValueError."""

    def test_default_message(self) -> None:
        exc = WildcardValueError()
        assert "wildcard" in str(exc)

    def test_is_assertion_error(self) -> None:
        assert isinstance(WildcardValueError(), AssertionError)
