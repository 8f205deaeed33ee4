"""Command line interface for quality-select."""

from quality_select.cli.main_cli import cli, main

__all__ = ["cli", "main"]
