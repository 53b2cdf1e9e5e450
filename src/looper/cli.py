"""Main CLI application for Looper."""

import typer
from rich.console import Console

from . import __version__

console = Console()
app = typer.Typer(
    name="looper",
    help="Repeat browser actions with for / while / do-while loops",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"Looper v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """
    Looper: repeat browser actions until a page reaches the state you expect.

    Each run performs one action (click, hover, fill, press) on an element and
    reports every iteration it completed.
    """


def register_commands() -> None:
    """Register CLI commands."""
    from .commands.init import init_command
    from .commands.run import run_command

    app.command("init", help="Initialize Looper in your project")(init_command)
    app.command("run", help="Run a repeat action against a page")(run_command)


register_commands()


if __name__ == "__main__":
    app()
