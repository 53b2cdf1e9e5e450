"""Init command implementation."""

from __future__ import annotations

import typer
from rich.console import Console

from looper.core.config.main import LooperConfig

console = Console()


def init_command(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing looper.yaml"),
) -> None:
    """Write a default looper.yaml to the current directory."""
    config_path = LooperConfig.get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Warning:[/yellow] {config_path} already exists. Use --force to overwrite.")
        raise typer.Exit(1)

    LooperConfig().save()
