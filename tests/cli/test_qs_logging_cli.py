from __future__ import annotations

import logging

from click.testing import CliRunner

from quality_select.cli.main_cli import cli

_FALLBACK_ARGS = ["resolve", "--available", "240,360", "--preferred", "1080"]


def test_verbose_writes_debug_records_to_stderr() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", *_FALLBACK_ARGS])
    assert result.exit_code == 0, result.output
    assert "falling back to 360" in result.stderr
    assert "falling back" not in result.stdout
    assert "returns   : [ 360, ]" in result.stdout


def test_default_level_hides_debug_records() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, _FALLBACK_ARGS)
    assert result.exit_code == 0, result.output
    assert "falling back" not in result.stderr


def test_handler_is_removed_after_invocation() -> None:
    package_logger = logging.getLogger("quality_select")
    handlers_before = list(package_logger.handlers)
    level_before = package_logger.level

    runner = CliRunner()
    result = runner.invoke(cli, ["--verbose", *_FALLBACK_ARGS])
    assert result.exit_code == 0, result.output

    assert package_logger.handlers == handlers_before
    assert package_logger.level == level_before
