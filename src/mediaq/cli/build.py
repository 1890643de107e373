"""
Stylesheet build command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from mediaq.cli.utils import console, fail, get_state
from mediaq.core.errors import MediaQueryError
from mediaq.core.stylesheet import process_file


def build_command(
    ctx: typer.Context,
    source: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True, help="Stylesheet to expand"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write here instead of stdout"),
    ] = None,
) -> None:
    """Expand @include media(...) and media-context(...) directives."""
    state = get_state(ctx)
    diagnostics = state.diagnostics()

    try:
        css = process_file(source, state.context, diagnostics)
    except MediaQueryError as e:
        fail(e)

    if output is None:
        typer.echo(css, nl=False)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(css, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {output}", highlight=False)

    if diagnostics.errors:
        console.print(
            f"[yellow]{len(diagnostics.errors)} block(s) dropped; see warnings above[/yellow]",
            highlight=False,
        )
