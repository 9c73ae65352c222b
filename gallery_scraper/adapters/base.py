from dataclasses import dataclass                 # dataclass creates lightweight, readable data objects
from typing import List, Optional                 # type hints for optional fields and generic lists

from gallery_scraper.config import CrawlTimings, DEFAULT_TIMINGS


@dataclass(frozen=True)
class Category:                                    # One game the profile has screenshots for
    id: str                                       # Canonical numeric id (Steam appid), identity of the game
    name: str                                     # Label shown in the filter dropdown


@dataclass(frozen=True)
class CategoryOption:                              # Discovery record, never persisted
    label: str                                    # Text of the dropdown entry
    token: str                                    # DOM id of the entry (e.g. "app_220"), clickable as "#token"


@dataclass(frozen=True)
class ScreenshotRecord:                            # One resolved screenshot
    category_ref: str                             # Category.id the screenshot belongs to
    resource_url: str                             # Full resolution image URL, query string removed


class GalleryAdapter:                              # Base class for every gallery site adapter
    name: str = "base"                            # Human-readable adapter name (override per site)
    domains: List[str] = []                       # Domain patterns handled by this adapter

    def __init__(self, timings: CrawlTimings = DEFAULT_TIMINGS):
        self.timings = timings

    def listing_url(self, target: str) -> str:    # Turns a profile id / URL into the gallery listing URL
        raise NotImplementedError

    async def open_listing(self, page, url): ...  # Loads the listing and waits for it to settle

    async def discover_categories(self, page) -> List[CategoryOption]:
        raise NotImplementedError

    async def switch_category(self, page, option: CategoryOption) -> str:
        """Make `option` the active filter and return its canonical category id."""
        raise NotImplementedError

    async def wait_until_loaded(self, page) -> bool:
        raise NotImplementedError

    async def harvest_links(self, page) -> List[str]:
        raise NotImplementedError

    async def resolve_resource(self, page, link: str) -> Optional[str]:
        """Return the canonical resource URL behind `link`, or None when it cannot be read."""
        raise NotImplementedError
