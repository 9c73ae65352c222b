from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from playwright.async_api import Error as PWError, Page

from gallery_scraper.adapters.base import Category, CategoryOption, GalleryAdapter, ScreenshotRecord
from gallery_scraper.errors import ScraperError


class CategoryCatalog:
    """Insertion-ordered games keyed by id; the first name registered for an id wins."""

    def __init__(self):
        self._by_id: Dict[str, Category] = {}

    def register(self, category_id: str, name: str) -> Category:
        if category_id not in self._by_id:
            self._by_id[category_id] = Category(id=category_id, name=name)
        return self._by_id[category_id]

    def __contains__(self, category_id: str) -> bool:
        return category_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def as_list(self) -> List[Category]:
        return list(self._by_id.values())


@dataclass(frozen=True)
class RunResult:
    records: Tuple[ScreenshotRecord, ...] = ()
    categories: Tuple[Category, ...] = ()
    failed_categories: Tuple[str, ...] = ()     # Labels of games skipped after a setup failure
    aborted: Optional[str] = None               # Reason when the run stopped before finishing


@dataclass
class GalleryCrawler:
    """
    Drives one adapter over one page, game by game.

    The page is shared and stateful, so every step runs strictly in order:
    switch → stabilize → harvest → resolve each link → back to the listing.
    Results accumulate on the crawler, so a caller can still read them with
    `snapshot()` after an abort.
    """

    adapter: GalleryAdapter
    page: Page
    base_url: str
    max_categories: Optional[int] = None
    records: List[ScreenshotRecord] = field(default_factory=list)
    catalog: CategoryCatalog = field(default_factory=CategoryCatalog)
    failed: List[str] = field(default_factory=list)
    aborted: Optional[str] = None

    async def discover(self) -> List[CategoryOption]:
        await self.adapter.open_listing(self.page, self.base_url)
        options = await self.adapter.discover_categories(self.page)
        print(f"[*] Found {len(options)} game(s) with screenshots.")
        return options

    async def crawl(self, options: List[CategoryOption]) -> RunResult:
        if self.max_categories is not None:
            options = options[: self.max_categories]

        for idx, option in enumerate(options, start=1):
            print(f"\n[GAME] {idx}/{len(options)} {option.label}")
            try:
                await self.crawl_category(option)
            except (ScraperError, PWError) as e:
                self.failed.append(option.label)
                print(f"[ERR ] Skipping '{option.label}': {e}")
            finally:
                await self.return_to_listing()

        return self.snapshot()

    async def crawl_category(self, option: CategoryOption) -> None:
        category_id = await self.adapter.switch_category(self.page, option)
        self.catalog.register(category_id, option.label)

        await self.adapter.wait_until_loaded(self.page)
        links = await self.adapter.harvest_links(self.page)
        print(f"[*] {len(links)} screenshot link(s) for {option.label} (id {category_id}).")

        resolved = 0
        for n, link in enumerate(links, start=1):
            print(f"[GET ] {n:03}/{len(links):03} {link}")
            url = await self.adapter.resolve_resource(self.page, link)
            if url is None:
                continue

            self.records.append(ScreenshotRecord(category_ref=category_id, resource_url=url))
            resolved += 1
            print(f"[OK ] {n:03}/{len(links):03} {url}")

        print(f"[DONE] {option.label}: {resolved}/{len(links)} screenshot(s) resolved.")

    async def return_to_listing(self) -> None:
        # Next switch needs the dropdown of the unfiltered listing
        try:
            await self.adapter.open_listing(self.page, self.base_url)
        except (ScraperError, PWError) as e:
            print(f"[ERR ] Could not reload the listing: {e}")

    def abort(self, reason: str) -> RunResult:
        self.aborted = reason
        return self.snapshot()

    def snapshot(self) -> RunResult:
        return RunResult(
            records=tuple(self.records),
            categories=tuple(self.catalog.as_list()),
            failed_categories=tuple(self.failed),
            aborted=self.aborted,
        )
