import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from linkharvest.core.constants import DEFAULT_LAUNCH_ARGS, DEFAULT_VIEWPORT
from linkharvest.recon.browser import BrowserManager


def fake_playwright():
    page = MagicMock(name="page")
    context = MagicMock(name="context")
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()
    browser = MagicMock(name="browser")
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()
    pw = MagicMock(name="playwright")
    pw.chromium.launch = AsyncMock(return_value=browser)
    pw.stop = AsyncMock()
    starter = MagicMock()
    starter.return_value.start = AsyncMock(return_value=pw)
    return starter, pw, browser, context, page


def test_context_manager_starts_and_closes():
    starter, pw, browser, context, page = fake_playwright()

    async def go():
        async with BrowserManager(headless=False) as manager:
            assert manager.page is page
        return manager

    with patch("linkharvest.recon.browser.async_playwright", starter):
        manager = asyncio.run(go())

    pw.chromium.launch.assert_awaited_once_with(headless=False, args=DEFAULT_LAUNCH_ARGS)
    assert browser.new_context.await_args.kwargs["viewport"] == DEFAULT_VIEWPORT
    context.close.assert_awaited_once()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()
    assert manager.page is None


def test_browser_closed_when_harvest_raises():
    starter, pw, browser, context, _ = fake_playwright()

    async def go():
        async with BrowserManager():
            raise RuntimeError("boom")

    with patch("linkharvest.recon.browser.async_playwright", starter):
        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(go())

    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


def test_partial_start_is_released():
    starter, pw, browser, context, _ = fake_playwright()
    browser.new_context.side_effect = RuntimeError("context failed")

    async def go():
        async with BrowserManager():
            pass

    with patch("linkharvest.recon.browser.async_playwright", starter):
        with pytest.raises(RuntimeError, match="context failed"):
            asyncio.run(go())

    context.close.assert_not_awaited()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()
