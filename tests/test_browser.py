"""Tests for browser session acquisition and release."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gallery_scraper.browser import CHROME_ARGS, UA, VIEWPORT, browser_page


def fake_playwright():
    pw = MagicMock()
    pw.stop = AsyncMock()
    browser = MagicMock()
    browser.close = AsyncMock()
    context = MagicMock()
    context.close = AsyncMock()
    page = MagicMock()

    pw.chromium.launch = AsyncMock(return_value=browser)
    browser.new_context = AsyncMock(return_value=context)
    context.new_page = AsyncMock(return_value=page)

    starter = MagicMock()
    starter.start = AsyncMock(return_value=pw)
    return starter, pw, browser, context, page


@pytest.mark.asyncio
async def test_yields_page_and_closes_everything():
    starter, pw, browser, context, page = fake_playwright()

    with patch("gallery_scraper.browser.async_playwright", return_value=starter):
        async with browser_page(headless=False) as opened:
            assert opened is page

    pw.chromium.launch.assert_awaited_once_with(headless=False, args=CHROME_ARGS)
    browser.new_context.assert_awaited_once_with(user_agent=UA, viewport=VIEWPORT)
    context.close.assert_awaited_once()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_closes_on_error():
    starter, pw, browser, context, page = fake_playwright()

    with patch("gallery_scraper.browser.async_playwright", return_value=starter):
        with pytest.raises(RuntimeError):
            async with browser_page():
                raise RuntimeError("crawl failed")

    context.close.assert_awaited_once()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()
