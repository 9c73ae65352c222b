from dataclasses import dataclass
# Frozen dataclass → one immutable bundle of timings shared by every pipeline step.


DEFAULT_OUT_DIR = "data"
# Where screenshots.json and games.json are written when --out-dir is not given.

SCREENSHOTS_FILE = "screenshots.json"
GAMES_FILE = "games.json"


@dataclass(frozen=True)
class CrawlTimings:
    """
    Every fixed wait the crawler performs, in one place.

    The screenshot wall refreshes through AJAX and exposes no "done" event,
    so the pipeline pauses for these settle intervals instead. They are
    liveness aids: shortening them only risks harvesting a half-loaded list.
    """

    switch_settle_ms: int = 2000
    # Pause after clicking a game in the filter dropdown.

    scroll_step_px: int = 500
    # Distance of a single scrollBy() during a scroll pass.

    scroll_step_delay_ms: int = 250
    # Pacing between two scroll steps.

    scroll_settle_ms: int = 1000
    # Pause after a full scroll pass, before the height is measured again.

    max_scroll_attempts: int = 10
    # Upper bound of measure → scroll → settle rounds per game.

    max_scroll_steps: int = 400
    # Upper bound of scroll steps inside one pass (guards ever-growing pages).

    wait_until: str = "networkidle"
    # Playwright readiness policy used for every navigation.


DEFAULT_TIMINGS = CrawlTimings()
