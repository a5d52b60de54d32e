"""Command-line interface."""

from mistcss.cli.main import cli

__all__ = ["cli"]
