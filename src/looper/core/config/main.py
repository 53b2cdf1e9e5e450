"""Configuration management for Looper."""

from __future__ import annotations

from pathlib import Path
from typing import Self

import typer
import yaml
from pydantic import BaseModel, PositiveInt
from rich.console import Console

from looper.core.loop.models import DEFAULT_MAX_ITERATIONS, ELEMENT_ATTACHED_TIMEOUT_MS

console = Console()


class ViewportConfig(BaseModel):
    """Viewport configuration settings."""

    width: int = 1280
    height: int = 720


class BrowserConfig(BaseModel):
    """Browser configuration settings."""

    headless: bool = True
    timeout: int = 30000  # milliseconds
    viewport: ViewportConfig = ViewportConfig()


class LoopConfig(BaseModel):
    """Loop pacing and safety bounds."""

    max_iterations: PositiveInt = DEFAULT_MAX_ITERATIONS
    for_delay_ms: int = 300
    condition_delay_ms: int = 100
    timeout_ms: int = ELEMENT_ATTACHED_TIMEOUT_MS


class LooperConfig(BaseModel):
    """Main Looper configuration."""

    browser: BrowserConfig = BrowserConfig()
    loop: LoopConfig = LoopConfig()
    verbose: bool = False

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the configuration file."""
        return Path.cwd() / "looper.yaml"

    @classmethod
    def load_config(cls) -> Self:
        """Load configuration from looper.yaml file."""
        config_path = cls.get_config_path()

        if not config_path.exists():
            console.print("[red]Error:[/red] No looper.yaml found.")
            console.print("Run [bold]looper init[/bold] to create a configuration file.")
            raise typer.Exit(1)

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            console.print(f"[red]{e.__class__.__name__} loading configuration:[/red] {e}")
            raise typer.Exit(-1) from e

    @classmethod
    def load_or_default(cls) -> Self:
        """Load looper.yaml if present, otherwise fall back to defaults."""
        if not cls.get_config_path().exists():
            return cls()
        return cls.load_config()

    def save(self) -> Path:
        """Save configuration to looper.yaml file."""
        config_path = self.get_config_path()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self.model_dump(), f, sort_keys=False)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error saving configuration:[/red] {e}")
            raise typer.Exit(-1) from e
        else:
            console.print(f"[green]Configuration saved to {config_path}[/green]")

        return config_path
