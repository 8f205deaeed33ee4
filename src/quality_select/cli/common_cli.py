"""Shared helpers for click-based `quality-select` commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from quality_select.domain.value import Value, parse_value_list
from quality_select.errors import ErrorEnvelope, ErrorType, make_error

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RUNTIME_ERROR = 2


class QsCliError(click.ClickException):
    """Click exception with explicit exit-code control and an error type."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int = EXIT_INPUT_ERROR,
        error_type: ErrorType = ErrorType.INVALID_INPUT,
    ) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)
        self.error_type = error_type

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, self.message, exit_code=self.exit_code)


def parse_values_option(text: str, *, option: str) -> list[Value]:
    """Parse a comma-separated `--option` value with user-facing errors."""
    try:
        return parse_value_list(text)
    except ValueError as exc:
        raise QsCliError(f"Invalid {option}: {exc}", exit_code=EXIT_INPUT_ERROR) from exc


def dump_json_output(payload: dict[str, Any], out_path: Path | None) -> None:
    """Write JSON payload to file or stdout."""
    text = json.dumps(payload, sort_keys=True, indent=2)
    if out_path is None:
        click.echo(text)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")


def load_json_file(path: Path, *, label: str) -> dict[str, Any]:
    """Load an object JSON file with user-facing errors."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise QsCliError(f"{label} not found: {path}") from exc
    except OSError as exc:
        raise QsCliError(f"Cannot read {label}: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QsCliError(f"Malformed JSON in {label}: {exc}") from exc

    if not isinstance(payload, dict):
        raise QsCliError(f"{label} must be a JSON object")
    return payload


def resolve_optional_output_path(output_arg: str | None) -> Path | None:
    """Map '-', empty, or None to stdout; otherwise return filesystem path."""
    if output_arg is None:
        return None
    value = str(output_arg).strip()
    if value in {"", "-"}:
        return None
    return Path(value)
