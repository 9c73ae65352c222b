"""Shared fixtures: an in-memory stand-in for a Playwright page on a Steam screenshot wall."""

from contextlib import asynccontextmanager

import pytest
from playwright.async_api import Error as PWError

from gallery_scraper.adapters.steam import SteamScreenshotsAdapter
from gallery_scraper.config import CrawlTimings

BASE_URL = "https://steamcommunity.com/profiles/76561198153749412/screenshots/"

FAST_TIMINGS = CrawlTimings(
    switch_settle_ms=0,
    scroll_step_px=500,
    scroll_step_delay_ms=0,
    scroll_settle_ms=0,
    max_scroll_attempts=10,
    max_scroll_steps=50,
)


class FakePage:
    """
    Mimics the handful of Page methods the crawler uses.

    options:       filter entries as {"label", "token"} dicts
    links:         token → hrefs shown on the wall once that game is active
    media:         detail URL → #ActualMedia src (missing key = no element)
    heights:       successive document heights; the next one appears each
                   time the scroll position reaches the bottom
    grow_forever:  every bottom hit adds 1000px instead of reading `heights`
    appid_in_url:  whether picking a game puts ?appid= into the location
    """

    def __init__(self, options=(), links=None, media=None, heights=(1000,), widget=True,
                 grow_forever=False, appid_in_url=True, broken_goto=(), broken_clicks=()):
        self.options = list(options)
        self.links = links or {}
        self.media = media or {}
        self.heights = list(heights)
        self.widget = widget
        self.grow_forever = grow_forever
        self.appid_in_url = appid_in_url
        self.broken_goto = set(broken_goto)
        self.broken_clicks = set(broken_clicks)

        self.url = "about:blank"
        self.active = None
        self.loads = 0
        self.extra = 0
        self.position = 0
        self.calls = []

    @property
    def height(self):
        if self.grow_forever:
            return self.heights[0] + self.extra
        return self.heights[min(self.loads, len(self.heights) - 1)]

    async def goto(self, url, wait_until=None):
        self.calls.append(("goto", url))
        if url in self.broken_goto:
            raise PWError(f"net::ERR_CONNECTION_RESET at {url}")
        self.url = url
        if url == BASE_URL:
            self.active = None
            self.loads = 0
            self.position = 0

    async def query_selector(self, selector):
        if selector == SteamScreenshotsAdapter.FILTER_OPTIONS and self.widget:
            return object()
        return None

    async def eval_on_selector_all(self, selector, expression):
        self.calls.append(("eval_all", selector))
        if selector == f"{SteamScreenshotsAdapter.FILTER_OPTIONS} > div":
            return [dict(o) for o in self.options]
        if selector == SteamScreenshotsAdapter.SCREENSHOT_LINKS:
            return list(self.links.get(self.active, []))
        return []

    async def eval_on_selector(self, selector, expression):
        if selector == SteamScreenshotsAdapter.MEDIA and self.url in self.media:
            return self.media[self.url]
        raise PWError(f"Error: failed to find element matching selector \"{selector}\"")

    async def click(self, selector):
        self.calls.append(("click", selector))
        if selector in self.broken_clicks:
            raise PWError(f"Timeout 30000ms exceeded waiting for {selector}")
        if selector.startswith("#app_"):
            self.active = selector[1:]
            if self.appid_in_url:
                self.url = f"{BASE_URL}?appid={self.active.split('_')[-1]}&sort=newestfirst"

    async def wait_for_selector(self, selector, state=None):
        self.calls.append(("wait_for_selector", selector, state))

    async def evaluate(self, expression, arg=None):
        if "scrollHeight" in expression:
            return self.height
        if "scrollBy" in expression:
            self.calls.append(("scroll", arg))
            self.position = min(self.position + arg, self.height)
            if self.position >= self.height:
                if self.grow_forever:
                    self.extra += 1000
                else:
                    self.loads += 1
            return None
        raise AssertionError(f"unexpected script: {expression}")

    async def wait_for_timeout(self, ms):
        self.calls.append(("sleep", ms))

    def called(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def adapter():
    return SteamScreenshotsAdapter(FAST_TIMINGS)


@pytest.fixture
def fake_browser():
    """Factory for an `open_browser` replacement that yields a given FakePage and records closing."""
    state = {"closed": 0, "headless": None}

    def make(page):
        @asynccontextmanager
        async def open_browser(headless=True):
            state["headless"] = headless
            try:
                yield page
            finally:
                state["closed"] += 1

        return open_browser

    make.state = state
    return make
