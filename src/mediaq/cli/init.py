"""
Project setup command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from mediaq.cli.utils import console, fail
from mediaq.core.config_loader import CONFIG_FILE, scaffold_config


def init_command(
    force: Annotated[
        bool, typer.Option("--force", help=f"Overwrite an existing {CONFIG_FILE}")
    ] = False,
) -> None:
    """Write a mediaq.yaml with the default vocabulary to the current directory."""
    path = scaffold_config(Path.cwd(), overwrite=force)
    if path is None:
        fail(f"{CONFIG_FILE} already exists; use --force to overwrite it")
    console.print(f"[green]✓[/green] Created {path}", highlight=False)
