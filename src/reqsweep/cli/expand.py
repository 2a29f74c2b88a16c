"""reqsweep expand -- print the rendered request payloads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from reqsweep.cli._common import json_output_enabled, load_or_exit, settings_or_exit
from reqsweep.cli.display import console
from reqsweep.exceptions import EmptyAxisError, ExpansionError, RenderError
from reqsweep.rendering import render_case


def expand_cmd(
    path: Annotated[
        Path,
        typer.Argument(help="Suite file or directory of suite files"),
    ],
    case: Annotated[
        int | None,
        typer.Option("--case", "-c", min=1, help="Only this test case (1-based)"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=1, help="Max requests printed per test case"),
    ] = None,
    max_axis_values: Annotated[
        int | None,
        typer.Option("--max-axis-values", help="Cap on values per numeric range axis"),
    ] = None,
) -> None:
    """Print the request payloads each test case expands to."""
    settings = settings_or_exit(max_axis_values)
    suites = load_or_exit(path)
    if case is not None and not any(s.enabled and case <= len(s.test) for s in suites):
        most = max((len(s.test) for s in suites if s.enabled), default=0)
        console.print(
            f"[red]Invalid --case:[/red] {case} is out of range "
            f"(suites have at most {most} cases)",
            soft_wrap=True,
        )
        raise typer.Exit(code=2)
    as_json = json_output_enabled()
    collected: list[dict[str, object]] = []

    for suite in suites:
        if not suite.enabled:
            if not as_json:
                console.print(f"[yellow]{escape(suite.source or 'suite')}: disabled[/yellow]")
            continue

        for index, test_case in enumerate(suite.test):
            if case is not None and index + 1 != case:
                continue
            try:
                rendered = render_case(test_case, max_axis_values=settings.max_axis_values)
            except EmptyAxisError as e:
                if not as_json:
                    console.print(
                        f"[yellow]#{index + 1} {escape(test_case.message)}: no requests[/yellow] "
                        f"[dim]({escape(str(e))})[/dim]",
                        soft_wrap=True,
                    )
                continue
            except (ExpansionError, RenderError) as e:
                console.print(
                    f"[red]Case #{index + 1} failed:[/red] {escape(str(e))}", soft_wrap=True
                )
                raise typer.Exit(code=1) from None

            requests = rendered.requests[:limit] if limit else rendered.requests
            if as_json:
                collected.append(
                    {
                        "source": suite.source,
                        "index": index,
                        "message": rendered.message,
                        "list_entries": rendered.list_entries,
                        "requests": requests,
                    }
                )
                continue

            console.print(
                f"[bold]#{index + 1} {escape(rendered.message)}[/bold] "
                f"[dim]({rendered.request_count} requests, "
                f"{rendered.list_entries} list entries)[/dim]",
                soft_wrap=True,
            )
            for request in requests:
                typer.echo(request)
            if len(requests) < rendered.request_count:
                console.print(
                    f"[dim]... truncated {rendered.request_count - len(requests)} requests[/dim]"
                )

    if as_json:
        typer.echo(json.dumps(collected, indent=2))
