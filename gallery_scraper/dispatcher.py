import asyncio
from urllib.parse import urlparse
# Used to extract the hostname of a gallery URL.
# Example: urlparse("https://steamcommunity.com/id/x").netloc → "steamcommunity.com"

from typing import Callable, List, Optional

from playwright.async_api import Error as PWError

from gallery_scraper.browser import browser_page
# browser_page → async context manager owning Playwright + browser + context + page

from gallery_scraper.adapters.base import CategoryOption, GalleryAdapter
from gallery_scraper.adapters.steam import SteamScreenshotsAdapter
from gallery_scraper.config import CrawlTimings, DEFAULT_TIMINGS
from gallery_scraper.errors import CrawlAborted, ScraperError, UnsupportedSiteError
from gallery_scraper.pipeline import GalleryCrawler, RunResult


# Registered adapter classes, matched against the URL host.
# The first entry also handles bare profile ids / vanity names.
ADAPTERS: List[type[GalleryAdapter]] = [
    SteamScreenshotsAdapter,
]

Selector = Callable[[List[CategoryOption]], List[CategoryOption]]


def pick_adapter(target: str, timings: CrawlTimings = DEFAULT_TIMINGS) -> GalleryAdapter:
    """
    Selects the adapter for a profile URL based on its domain.
    Anything that is not a URL is treated as a profile id of the default site.
    """
    if not target.startswith("http"):
        return ADAPTERS[0](timings)

    host = urlparse(target).netloc.lower()

    for cls in ADAPTERS:
        if any(d in host for d in cls.domains):
            return cls(timings)

    raise UnsupportedSiteError(f"No adapter registered for host: {host}")


def select_all(options: List[CategoryOption]) -> List[CategoryOption]:
    return list(options)


async def crawl_gallery(
    target: str,
    select: Selector = select_all,
    headless: bool = True,
    timings: CrawlTimings = DEFAULT_TIMINGS,
    max_categories: Optional[int] = None,
    open_browser=browser_page,
) -> RunResult:
    """
    High-level crawl function.
    Steps:
        1. Pick the adapter and build the listing URL for `target`.
        2. Open the browser (closed again on every exit path).
        3. Discover the games, let `select` narrow them down.
        4. Crawl each selected game in order.
        5. Return the accumulated result; on a fatal error the result
           carries the reason in `aborted` plus everything gathered so far.
           Unexpected errors are re-raised as CrawlAborted carrying that result.
    """
    adapter = pick_adapter(target, timings)
    base_url = adapter.listing_url(target)
    print(f"[*] Listing: {base_url}")

    async with open_browser(headless=headless) as page:
        crawler = GalleryCrawler(adapter=adapter, page=page, base_url=base_url, max_categories=max_categories)

        try:
            options = await crawler.discover()
            if not options:
                return crawler.snapshot()

            # The prompt blocks on stdin; keep it off the loop Playwright talks through
            selected = await asyncio.to_thread(select, options)
            return await crawler.crawl(selected)

        except (ScraperError, PWError) as e:
            print(f"[ERR ] Run aborted: {e}")
            return crawler.abort(str(e))

        except Exception as e:
            print(f"[ERR ] Run aborted by unexpected error: {e!r}")
            raise CrawlAborted(crawler.abort(repr(e))) from e
