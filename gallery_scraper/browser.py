from contextlib import asynccontextmanager

from playwright.async_api import async_playwright
# Async Playwright API: the whole crawl runs on one event loop and one page.


CHROME_ARGS = [
    "--disable-blink-features=AutomationControlled",
    # Keeps navigator.webdriver unset so the community pages render like for a normal visitor.

    "--no-sandbox",
    # Needed inside Docker / CI where Chromium's sandbox lacks permissions.

    "--disable-dev-shm-usage",
    # Small /dev/shm in containers otherwise crashes long screenshot walls.
]


UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/133.0.0.0 Safari/537.36"
)
# Desktop Chrome UA; the default headless UA gets the mobile screenshot wall.


VIEWPORT = {"width": 1366, "height": 900}
# Below ~800px Steam collapses the game filter into a different widget.


async def open_page(headless: bool = True):
    """
    Starts Playwright, launches Chromium, creates a context and opens a page.

    Returns:
        pw: Playwright instance
        browser: Chromium browser object
        context: Browser context (cookies, cache)
        page: The single tab every pipeline step drives
    """
    pw = await async_playwright().start()
    browser = await pw.chromium.launch(headless=headless, args=CHROME_ARGS)
    context = await browser.new_context(user_agent=UA, viewport=VIEWPORT)
    page = await context.new_page()
    return pw, browser, context, page


async def close_page(pw, browser, context):
    """
    Releases Playwright resources in reverse order of creation.
    Leaving any of them open leaks a Chromium process or the Node driver.
    """
    await context.close()
    await browser.close()
    await pw.stop()


@asynccontextmanager
async def browser_page(headless: bool = True):
    # Scoped acquisition: the browser is closed on success and on every abort path.
    pw, browser, context, page = await open_page(headless=headless)
    try:
        yield page
    finally:
        await close_page(pw, browser, context)
