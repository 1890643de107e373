"""
mediaq CLI package.

- query.py: compile and check commands
- build.py: stylesheet expansion
- breakpoints.py: vocabulary listing
- init.py: mediaq.yaml scaffolding
- utils.py: shared state and helpers
"""

from __future__ import annotations

from pathlib import Path

import typer

from mediaq.cli.breakpoints import breakpoints_command
from mediaq.cli.build import build_command
from mediaq.cli.init import init_command
from mediaq.cli.query import check_command, compile_command
from mediaq.cli.utils import configure_logging, load_state, version_callback

app = typer.Typer(
    help="""mediaq – breakpoint expressions to CSS media queries

  • compile '>=tablet' '<desktop'   → media query clauses
  • check '>=phone'                 → static fallback evaluation
  • build styles.scss -o out.css    → expand @include media(...) directives
  • breakpoints                     → show the vocabulary in effect
  • init                            → write mediaq.yaml with the defaults
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to mediaq.yaml (default: nearest mediaq.yaml, else built-in defaults)",
    ),
    warn: bool = typer.Option(
        False, "--warn", help="Drop failing blocks with a warning instead of stopping"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """mediaq CLI main callback for global options."""
    configure_logging(verbose)
    ctx.obj = load_state(config, warn)


app.command(name="init")(init_command)
app.command(name="compile")(compile_command)
app.command(name="check")(check_command)
app.command(name="build")(build_command)
app.command(name="breakpoints")(breakpoints_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
