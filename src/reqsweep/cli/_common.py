"""Helpers shared by the plan and expand commands."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape

from reqsweep.cli.display import console
from reqsweep.config.loader import load_suites
from reqsweep.config.models import ExpansionSettings, SuiteConfig
from reqsweep.exceptions import ConfigError


def json_output_enabled() -> bool:
    return os.environ.get("REQSWEEP_JSON_OUTPUT", "false") == "true"


def load_or_exit(path: Path) -> list[SuiteConfig]:
    """Load suites, turning ConfigError into exit code 2."""
    try:
        return load_suites(path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from None


def settings_or_exit(max_axis_values: int | None) -> ExpansionSettings:
    try:
        if max_axis_values is None:
            return ExpansionSettings()
        return ExpansionSettings(max_axis_values=max_axis_values)
    except ValidationError as e:
        console.print(f"[red]Invalid --max-axis-values:[/red] {e.errors()[0]['msg']}")
        raise typer.Exit(code=2) from None
