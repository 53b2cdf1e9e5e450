"""Run command implementation."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer
import yaml
from playwright.async_api import async_playwright
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from looper.core.config.main import LooperConfig
from looper.core.loop import LoopError, Report, parse_params, validate_params
from looper.core.tab import TabSession
from looper.tools.repeat_action import handle

if TYPE_CHECKING:
    from looper.core.config.main import BrowserConfig

console = Console()


def _load_params(spec_file: Path) -> dict[str, Any]:
    """Load an invocation payload from a YAML (or JSON) file."""
    try:
        with open(spec_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        console.print(f"[red]{e.__class__.__name__} reading {spec_file}:[/red] {e}")
        raise typer.Exit(1) from e

    if not isinstance(data, dict):
        console.print(f"[red]Error:[/red] {spec_file} must contain a mapping with 'loop' and 'action'")
        raise typer.Exit(1)
    return data


async def _run_in_browser(url: str, params: dict[str, Any], config: LooperConfig) -> str:
    browser_config: BrowserConfig = config.browser
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=browser_config.headless)
        try:
            context = await browser.new_context(viewport=browser_config.viewport.model_dump())
            page = await context.new_page()
            page.set_default_timeout(browser_config.timeout)

            console.print(f"🌐 Navigating to: {url}")
            await page.goto(url)

            return await handle(TabSession(page, settle_timeout_ms=browser_config.timeout), params, config)
        finally:
            await browser.close()


def run_command(
    spec_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON file with loop, action and limits"),
    url: str = typer.Option(..., "--url", "-u", help="Page to open before running the action"),
    headless: bool | None = typer.Option(None, "--headless/--headed", help="Override browser.headless"),
    verbose: bool | None = typer.Option(None, "--verbose/--quiet", help="Override verbose output"),
) -> None:
    """Run a repeat action and print its report."""
    config = LooperConfig.load_or_default()
    if headless is not None:
        config.browser.headless = headless
    if verbose is not None:
        config.verbose = verbose

    params = _load_params(spec_file)

    try:
        validate_params(parse_params(params))
        output = asyncio.run(_run_in_browser(url, params, config))
    except LoopError as e:
        console.print(f"[red]{e.__class__.__name__}:[/red] {e}")
        raise typer.Exit(1) from e

    report = Report.model_validate_json(output)
    console.print(
        Panel(
            Syntax(output, "json", word_wrap=True),
            title="🔁 Repeat action report",
            title_align="left",
            border_style="green" if report.passed else "red",
            expand=False,
        )
    )
    raise typer.Exit(0 if report.passed else 1)
