"""
Vocabulary listing command.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table

from mediaq.cli.utils import console, get_state
from mediaq.core.config_loader import context_summary


def breakpoints_command(
    ctx: typer.Context,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List breakpoints, media expressions and unit intervals in effect."""
    state = get_state(ctx)
    summary = context_summary(state.context)

    if output_json:
        typer.echo(json.dumps(summary, indent=2, ensure_ascii=False))
        return

    table = Table(title="Breakpoints")
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in summary["breakpoints"].items():
        marker = " (static fallback)" if name == summary["no_media_breakpoint"] else ""
        table.add_row(name + marker, value)
    console.print(table)

    table = Table(title="Media expressions")
    table.add_column("Name", style="cyan")
    table.add_column("Query")
    for name, query in summary["media_expressions"].items():
        table.add_row(name, query)
    console.print(table)

    table = Table(title="Unit intervals")
    table.add_column("Unit", style="cyan")
    table.add_column("Interval", justify="right")
    for unit, interval in summary["unit_intervals"].items():
        table.add_row(unit or "(none)", interval)
    console.print(table)

    if not summary["media_support"]:
        console.print(
            f"[yellow]Media queries disabled; emulating `{summary['no_media_breakpoint']}`[/yellow]"
        )
