"""Plan summary rendering."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from reqsweep.cli.display.console import console
from reqsweep.orchestration.plan import SuitePlan


def display_plan(plan: SuitePlan) -> None:
    """Print one suite plan as a table, followed by any skipped cases."""
    title = escape(plan.source or "suite")
    if not plan.enabled:
        console.print(f"[yellow]{title}: disabled, skipped[/yellow]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Message", style="bold")
    table.add_column("Requests", justify="right", style="cyan")
    table.add_column("List entries", justify="right")

    for planned in plan.cases:
        table.add_row(
            str(planned.index + 1),
            escape(planned.case.message),
            str(planned.case.request_count),
            str(planned.case.list_entries),
        )
    console.print(table)

    for skipped in plan.skipped:
        console.print(
            f"[red]Skipped {escape(skipped.short_label)}:[/red] {escape(skipped.reason)}",
            soft_wrap=True,
        )
    console.print(f"[dim]{escape(plan.summary)}[/dim]", soft_wrap=True)
