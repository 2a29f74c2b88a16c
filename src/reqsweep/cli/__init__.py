"""Command-line interface for reqsweep.

Provides commands for:
- Planning how many requests each test case of a suite expands to
- Printing the rendered request payloads
"""

from __future__ import annotations

# Load .env file BEFORE any reqsweep imports (constants reads env vars at import time)
from dotenv import load_dotenv

load_dotenv()

# ruff: noqa: E402 - imports must come after load_dotenv()
import os
from typing import Annotated

import typer

from reqsweep.cli.display import console
from reqsweep.constants import SCHEMA_VERSION
from reqsweep.logging import setup_logging

app = typer.Typer(
    name="reqsweep",
    help="Combinatorial request template expansion",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"reqsweep v{SCHEMA_VERSION}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable full logs with timestamps")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Minimal output (warnings only)")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output results as JSON (machine-readable)")
    ] = False,
) -> None:
    """Combinatorial request template expansion."""
    from reqsweep.logging import VerbosityType

    verbosity: VerbosityType
    if quiet:
        verbosity = "quiet"
    elif verbose:
        verbosity = "verbose"
    else:
        verbosity = "normal"

    os.environ["REQSWEEP_VERBOSITY"] = verbosity
    os.environ["REQSWEEP_JSON_OUTPUT"] = "true" if json_output else "false"
    setup_logging(verbosity=verbosity)


def _register_commands() -> None:
    """Register all commands with the app.

    Done in a function to control import order and avoid circular imports.
    """
    from reqsweep.cli import expand, plan

    app.command("plan")(plan.plan_cmd)
    app.command("expand")(expand.expand_cmd)


_register_commands()


__all__ = ["app", "console", "main"]

if __name__ == "__main__":
    app()
