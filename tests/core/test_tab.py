"""Tests for the tab execution scope."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from looper.core.tab import TabSession


def make_tab() -> TabSession:
    page = MagicMock()
    page.wait_for_load_state = AsyncMock()
    return TabSession(page, settle_timeout_ms=500)


async def test_holds_the_tab_and_settles_after() -> None:
    tab = make_tab()

    async with tab.wait_for_completion():
        assert tab.busy

    assert not tab.busy
    tab.page.wait_for_load_state.assert_awaited_once_with("load", timeout=500)


async def test_releases_on_error_without_settling() -> None:
    tab = make_tab()

    with pytest.raises(RuntimeError):
        async with tab.wait_for_completion():
            raise RuntimeError("boom")

    assert not tab.busy
    tab.page.wait_for_load_state.assert_not_awaited()


async def test_settle_timeout_is_not_fatal() -> None:
    tab = make_tab()
    tab.page.wait_for_load_state.side_effect = PlaywrightTimeoutError("Timeout 500ms exceeded")

    async with tab.wait_for_completion():
        pass

    assert not tab.busy
