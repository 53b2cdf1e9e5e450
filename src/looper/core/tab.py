"""Scoped access to a browser tab."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Protocol

from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from contextlib import AbstractAsyncContextManager

    from playwright.async_api import Page


console = Console()


class ExecutionScope(Protocol):
    def wait_for_completion(self) -> AbstractAsyncContextManager[None]: ...


class TabSession:
    """A Playwright page that runs one tool operation at a time.

    ``wait_for_completion`` holds the tab for the duration of the block and,
    once the block succeeds, lets the page settle before handing it back.
    """

    def __init__(self, page: Page, settle_timeout_ms: int = 30000) -> None:
        self.page = page
        self.settle_timeout_ms = settle_timeout_ms
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def wait_for_completion(self) -> AsyncIterator[None]:
        async with self._lock:
            yield
            try:
                await self.page.wait_for_load_state("load", timeout=self.settle_timeout_ms)
            except PlaywrightTimeoutError:
                console.print("[yellow]Warning:[/yellow] page did not finish loading after the operation")
