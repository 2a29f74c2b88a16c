"""reqsweep plan -- summarize how many requests each test case expands to."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from reqsweep.cli._common import json_output_enabled, load_or_exit, settings_or_exit
from reqsweep.cli.display import display_plan
from reqsweep.orchestration.plan import build_plan


def plan_cmd(
    path: Annotated[
        Path,
        typer.Argument(help="Suite file or directory of suite files"),
    ],
    max_axis_values: Annotated[
        int | None,
        typer.Option("--max-axis-values", help="Cap on values per numeric range axis"),
    ] = None,
) -> None:
    """Plan the requests of every test case without sending anything."""
    settings = settings_or_exit(max_axis_values)
    suites = load_or_exit(path)
    plans = [build_plan(suite, settings) for suite in suites]

    if json_output_enabled():
        payload = [
            {
                "source": plan.source,
                "enabled": plan.enabled,
                "total_requests": plan.total_requests,
                "total_list_entries": plan.total_list_entries,
                "cases": [
                    {
                        "index": planned.index,
                        "message": planned.case.message,
                        "requests": planned.case.request_count,
                        "list_entries": planned.case.list_entries,
                    }
                    for planned in plan.cases
                ],
                "skipped": [s.to_dict() for s in plan.skipped],
            }
            for plan in plans
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    for plan in plans:
        display_plan(plan)

    if any(plan.skipped for plan in plans):
        raise typer.Exit(code=1)
