"""CLI display helpers."""

from reqsweep.cli.display.console import console
from reqsweep.cli.display.tables import display_plan

__all__ = ["console", "display_plan"]
