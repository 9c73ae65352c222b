class ScraperError(Exception):
    """Base class for every error raised by the gallery scraper."""


class DiscoveryError(ScraperError):
    # The listing page lacks the filter widget; nothing can be crawled.
    pass


class CategorySwitchError(ScraperError):
    def __init__(self, label: str, reason: str):
        super().__init__(f"Could not switch to '{label}': {reason}")
        self.label = label
        self.reason = reason


class UnsupportedSiteError(ScraperError, ValueError):
    pass


class CrawlAborted(ScraperError):
    """Raised when an unexpected error stops a run; `result` holds what was gathered before it."""

    def __init__(self, result):
        super().__init__(result.aborted)
        self.result = result
