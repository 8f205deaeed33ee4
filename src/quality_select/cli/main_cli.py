"""CLI entrypoint for quality selection.

This module provides the `quality-select` command group:

Usage:
    quality-select resolve --available 240,360,720 --allowed 360,720 --preferred 1080
    quality-select resolve --request request.json --json
    quality-select demo
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from quality_select.cli.common_cli import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EXIT_RUNTIME_ERROR,
    QsCliError,
    dump_json_output,
    load_json_file,
    parse_values_option,
    resolve_optional_output_path,
)
from quality_select.domain.request import SelectionRequest, SelectionResult
from quality_select.domain.value import ANY, Number, Value, format_values
from quality_select.errors import ErrorType
from quality_select.selection.resolve import resolve_request

logger = logging.getLogger(__name__)

# (available, allowed, preferred) triples shown by `quality-select demo`.
DEMO_SCENARIOS: list[tuple[list[int], list[Value], list[Value]]] = [
    ([240, 360, 720], [Number(360), Number(720)], [Number(1080)]),
    ([240, 720], [Number(360), Number(720)], [Number(1080)]),
    ([240], [Number(360), Number(720)], [Number(1080)]),
    (
        [240, 360, 720],
        [Number(240), Number(360), Number(720), Number(1080)],
        [Number(240), Number(360)],
    ),
    (
        [240, 720],
        [Number(240), Number(360), Number(720), Number(1080)],
        [Number(240), Number(360)],
    ),
    ([240, 720], [Number(240), Number(360), Number(1080)], [Number(240), Number(360)]),
    ([720], [Number(240), Number(360), Number(1080)], [Number(240), Number(360)]),
    ([240, 360], [Number(240), Number(360)], [Number(720), Number(1080)]),
    ([240, 360, 720], [Number(360), ANY], [Number(360), Number(720)]),
    ([240, 360, 720], [Number(240), Number(360), Number(720)], [ANY, Number(720)]),
    ([240, 360, 720], [Number(360), Number(1080)], [ANY, Number(720)]),
    ([240, 360, 720], [Number(1080)], [ANY, Number(720)]),
]


def _configure_logging(ctx: click.Context, verbose: bool) -> None:
    """Send package log records to stderr for the lifetime of `ctx`."""
    package_logger = logging.getLogger("quality_select")
    previous_level = package_logger.level

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    def _restore() -> None:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)

    ctx.call_on_close(_restore)


def _validation_error_to_cli(exc: ValidationError) -> QsCliError:
    messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
    unsorted = any("sorted ascending" in err["msg"] for err in exc.errors())
    return QsCliError(
        "Invalid selection request: " + "; ".join(messages),
        exit_code=EXIT_INPUT_ERROR,
        error_type=ErrorType.UNSORTED_INPUT if unsorted else ErrorType.INVALID_INPUT,
    )


def _or_any(text: str | None) -> str:
    return "any" if text is None else text


def _build_request(
    available: str | None,
    allowed: str | None,
    preferred: str | None,
    request_path: Path | None,
) -> SelectionRequest:
    if request_path is not None:
        if any(opt is not None for opt in (available, allowed, preferred)):
            raise QsCliError(
                "--request cannot be combined with --available/--allowed/--preferred"
            )
        payload = load_json_file(request_path, label="request file")
        try:
            return SelectionRequest.model_validate(payload)
        except ValidationError as exc:
            raise _validation_error_to_cli(exc) from exc

    if available is None:
        raise QsCliError("--available is required unless --request is given")

    available_values = parse_values_option(available, option="--available")
    if any(value.is_any() for value in available_values):
        raise QsCliError("Invalid --available: the wildcard is only valid for allowed/preferred")

    try:
        return SelectionRequest(
            available=tuple(value.assume_number() for value in available_values),
            allowed=tuple(parse_values_option(_or_any(allowed), option="--allowed")),
            preferred=tuple(parse_values_option(_or_any(preferred), option="--preferred")),
        )
    except ValidationError as exc:
        raise _validation_error_to_cli(exc) from exc


def _echo_selection(
    available: list[int] | tuple[int, ...],
    allowed: list[Value] | tuple[Value, ...],
    preferred: list[Value] | tuple[Value, ...],
    selected: list[int] | tuple[int, ...],
) -> None:
    click.echo(f"available : {format_values(available)}")
    click.echo(f"allowed   : {format_values(allowed)}")
    click.echo(f"preferred : {format_values(preferred)}")
    click.echo(f"returns   : {format_values(selected)}")
    click.echo()


@click.group()
@click.version_option(package_name="quality-select")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """quality-select CLI for picking a quality level."""
    _configure_logging(ctx, verbose)


@cli.command("resolve")
@click.option(
    "--available",
    default=None,
    help="Comma-separated available values, ascending (e.g. 240,360,720).",
)
@click.option(
    "--allowed",
    default=None,
    help="Comma-separated allowed values or 'any', ascending. [default: any]",
)
@click.option(
    "--preferred",
    default=None,
    help="Comma-separated preferred values or 'any', ascending. [default: any]",
)
@click.option(
    "--request",
    "request_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with available/allowed/preferred lists.",
)
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit JSON output.")
@click.option(
    "--out",
    "output_arg",
    default=None,
    help="Write JSON output to this path ('-' for stdout). Implies --json.",
)
def resolve_command(
    available: str | None,
    allowed: str | None,
    preferred: str | None,
    request_path: Path | None,
    json_output: bool,
    output_arg: str | None,
) -> None:
    """Select the available values that are allowed and closest to the preferred ones."""
    out_path = resolve_optional_output_path(output_arg)
    as_json = json_output or out_path is not None

    try:
        request = _build_request(available, allowed, preferred, request_path)
    except QsCliError as exc:
        if not as_json:
            raise
        logger.debug("Rejected selection request: %s", exc.message)
        dump_json_output({"error": exc.to_envelope().model_dump(mode="json")}, out_path)
        click.get_current_context().exit(exc.exit_code)

    result: SelectionResult = resolve_request(request)
    if as_json:
        dump_json_output(result.model_dump(mode="json"), out_path)
        return
    _echo_selection(request.available, request.allowed, request.preferred, result.selected)


@cli.command("demo")
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit JSON output.")
def demo_command(json_output: bool) -> None:
    """Run the built-in example selections."""
    results = [
        resolve_request(
            SelectionRequest(
                available=tuple(available),
                allowed=tuple(allowed),
                preferred=tuple(preferred),
            )
        )
        for available, allowed, preferred in DEMO_SCENARIOS
    ]

    if json_output:
        dump_json_output({"scenarios": [r.model_dump(mode="json") for r in results]}, None)
        return
    for result in results:
        request = result.request
        _echo_selection(request.available, request.allowed, request.preferred, result.selected)


def main() -> int:
    """Main entry point for the CLI."""
    try:
        rv = cli.main(standalone_mode=False)
        return rv if isinstance(rv, int) else EXIT_OK
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
