"""
Expression commands: compile conditions and check the static fallback.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer

from mediaq.cli.utils import fail, get_state
from mediaq.core.errors import MediaQueryError
from mediaq.core.media_expr import intercepts_static_breakpoint, media, parse_expression


def compile_command(
    ctx: typer.Context,
    conditions: Annotated[
        list[str], typer.Argument(help="Conditions such as '>=tablet' or 'retina2x'")
    ],
    body: Annotated[
        str | None,
        typer.Option("--body", "-b", help="Wrap this CSS in the combined @media block"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Compile conditions into media query clauses."""
    state = get_state(ctx)
    context = state.context

    try:
        clauses = [parse_expression(condition, context) for condition in conditions]
        css = media(*conditions, body=body, context=context) if body is not None else None
    except MediaQueryError as e:
        fail(e)

    if output_json:
        payload: dict[str, object] = {
            "conditions": dict(zip(conditions, clauses, strict=True)),
        }
        if css is not None:
            payload["css"] = css
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if css is not None:
        typer.echo(css, nl=False)
        return
    for clause in clauses:
        typer.echo(clause)


def check_command(
    ctx: typer.Context,
    conditions: Annotated[list[str], typer.Argument(help="Conditions to evaluate")],
    fallback: Annotated[
        str | None,
        typer.Option("--fallback", "-f", help="Breakpoint assumed without media queries"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Check whether conditions hold at the static fallback breakpoint."""
    state = get_state(ctx)
    context = state.context
    if fallback is not None:
        context = context.model_copy(update={"no_media_breakpoint": fallback})

    try:
        result = intercepts_static_breakpoint(conditions, context)
    except MediaQueryError as e:
        fail(e)

    if output_json:
        typer.echo(
            json.dumps(
                {"fallback": context.no_media_breakpoint, "intercepts": result},
                indent=2,
            )
        )
        return

    verdict = "intercepts" if result else "does not intercept"
    typer.echo(f"{verdict} `{context.no_media_breakpoint}`")
