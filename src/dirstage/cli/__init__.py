"""CLI entrypoints for dirstage."""

from dirstage.cli.stage import app as stage_app
from dirstage.cli.stage import run_cli

__all__ = ["run_cli", "stage_app"]
