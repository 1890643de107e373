"""
mediaq CLI utilities.

Shared state and helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from mediaq._version import get_version
from mediaq.core.config_loader import CONFIG_FILE, MediaqConfig, find_config, load_config
from mediaq.core.diagnostics import Diagnostics, ErrorPolicy
from mediaq.core.errors import MediaQueryError
from mediaq.core.ir.context import ResolutionContext

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    """Options shared by every command, set by the main callback."""

    config_path: Path | None = None
    warn: bool = False
    config: MediaqConfig = field(default_factory=MediaqConfig)

    @property
    def context(self) -> ResolutionContext:
        return self.config.to_context()

    def diagnostics(self) -> Diagnostics:
        policy = ErrorPolicy.WARN if self.warn else self.config.error_policy
        return Diagnostics(policy=policy)


def load_state(config_path: Path | None, warn: bool) -> CliState:
    """Resolve and load the config file for this invocation.

    Without --config, mediaq.yaml is looked up from the current directory
    upwards.
    """
    path = config_path if config_path is not None else find_config(Path.cwd())
    try:
        config = load_config(path, use_defaults=config_path is None)
    except MediaQueryError as e:
        fail(e)
    return CliState(config_path=path, warn=warn, config=config)


def get_state(ctx: typer.Context) -> CliState:
    """State stored by the main callback (defaults when invoked directly)."""
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return load_state(None, warn=False)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def fail(error: MediaQueryError | str, code: int = 1) -> NoReturn:
    """Print an error in red and exit."""
    err_console.print(str(error), style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=code)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"mediaq version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        python = f"{platform.python_implementation()} {platform.python_version()}"
        typer.echo(f"  Python:        {python}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        config_path = find_config(Path.cwd())
        typer.echo(f"  Config:        {config_path or f'(no {CONFIG_FILE}, using defaults)'}")
        raise typer.Exit()
