import re
from typing import List, Optional

from playwright.async_api import Error as PWError

from gallery_scraper.adapters.base import CategoryOption, GalleryAdapter
from gallery_scraper.errors import CategorySwitchError, DiscoveryError
from gallery_scraper.utils.scroll import scroll_until_stable
from gallery_scraper.utils.urls import canonical_resource_url, query_param

_STEAMID64_RE = re.compile(r"^\d{17}$")
_DIGITS_RE = re.compile(r"^\d+$")


def derive_category_id(token: str) -> str:
    """
    Maps a filter entry's DOM id to a game id: "app_220" → "220".
    Tokens without an underscore are returned untouched.
    """
    return token.rsplit("_", 1)[-1]


class SteamScreenshotsAdapter(GalleryAdapter):
    name = "steam"
    domains = ["steamcommunity.com"]

    HOST = "https://steamcommunity.com"
    FILTER_TOGGLE = "#sharedfiles_filterselect_app_activeoption"   # Dropdown head showing the current game
    FILTER_OPTIONS = "#sharedfiles_filterselect_app_filterable"    # Container of the per-game entries
    SCREENSHOT_LINKS = "#BatchScreenshotManagement a"              # Thumbnails on the screenshot wall
    MEDIA = "#ActualMedia"                                         # Full image on a screenshot's detail page

    def listing_url(self, target: str) -> str:
        target = target.strip()

        if target.startswith("http"):
            url = target.split("?", 1)[0].rstrip("/")
            if not url.endswith("/screenshots"):
                url += "/screenshots"
            return url + "/"

        if _STEAMID64_RE.match(target):
            return f"{self.HOST}/profiles/{target}/screenshots/"

        return f"{self.HOST}/id/{target}/screenshots/"

    async def open_listing(self, page, url):
        await page.goto(url, wait_until=self.timings.wait_until)

    async def discover_categories(self, page) -> List[CategoryOption]:
        widget = await page.query_selector(self.FILTER_OPTIONS)
        if widget is None:
            raise DiscoveryError(f"No game filter ({self.FILTER_OPTIONS}) on {page.url}")

        raw = await page.eval_on_selector_all(
            f"{self.FILTER_OPTIONS} > div",
            "divs => divs.map(d => ({label: (d.textContent || '').trim(), token: d.id}))",
        )

        # Entries without an id cannot be clicked through a selector
        return [CategoryOption(label=r["label"], token=r["token"]) for r in raw if r.get("token")]

    async def switch_category(self, page, option: CategoryOption) -> str:
        try:
            await page.click(self.FILTER_TOGGLE)
            await page.wait_for_selector(self.FILTER_OPTIONS, state="visible")
            await page.click(f"#{option.token}")
            await page.wait_for_timeout(self.timings.switch_settle_ms)
        except PWError as e:
            raise CategorySwitchError(option.label, str(e)) from e

        appid = query_param(page.url, "appid")
        if appid and _DIGITS_RE.match(appid):
            return appid

        return derive_category_id(option.token)

    async def wait_until_loaded(self, page) -> bool:
        return await scroll_until_stable(page, self.timings)

    async def harvest_links(self, page) -> List[str]:
        hrefs = await page.eval_on_selector_all(self.SCREENSHOT_LINKS, "anchors => anchors.map(a => a.href)")
        return [h for h in hrefs if h]

    async def resolve_resource(self, page, link: str) -> Optional[str]:
        try:
            await page.goto(link, wait_until=self.timings.wait_until)
            src = await page.eval_on_selector(self.MEDIA, "img => img.src")
        except PWError as e:
            print(f"[SKIP] {link}: {e}")
            return None

        if not src:
            print(f"[SKIP] {link}: {self.MEDIA} has no src")
            return None

        return canonical_resource_url(src)
