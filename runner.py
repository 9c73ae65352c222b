import argparse
import asyncio
import sys
import traceback
from functools import partial

from gallery_scraper.config import CrawlTimings, DEFAULT_OUT_DIR
from gallery_scraper.dispatcher import crawl_gallery
from gallery_scraper.errors import CrawlAborted, UnsupportedSiteError
from gallery_scraper.selection import parse_selection, prompt_selection
from gallery_scraper.storage import write_results


def parse_args(argv=None):
    defaults = CrawlTimings()
    p = argparse.ArgumentParser(description="Steam screenshot gallery crawler")
    p.add_argument("profile", help="SteamID64, vanity name or full steamcommunity.com profile URL")
    p.add_argument("--game", type=str, default=None,
                   help="'all' or the 1-based number of one game; skips the interactive prompt")
    p.add_argument("--no-prompt", action="store_true", help="Crawl every game without asking")
    p.add_argument("--max-games", type=int, default=None, help="Stop after this many games")
    p.add_argument("--headful", action="store_true", help="Show the browser window")
    p.add_argument("--out-dir", type=str, default=DEFAULT_OUT_DIR, help="Folder for the JSON output")
    p.add_argument("--minimal", action="store_true",
                   help="Write screenshots.json as plain {url} entries without gameId")
    p.add_argument("--switch-settle-ms", type=int, default=defaults.switch_settle_ms,
                   help="Pause after picking a game in the filter")
    p.add_argument("--scroll-settle-ms", type=int, default=defaults.scroll_settle_ms,
                   help="Pause after each scroll pass")
    p.add_argument("--max-scroll-attempts", type=int, default=defaults.max_scroll_attempts,
                   help="Scroll rounds before harvesting a still-growing list")
    return p.parse_args(argv)


def build_selector(args):
    if args.game is not None:
        return partial(parse_selection, args.game)
    if args.no_prompt or not sys.stdin.isatty():
        return list
    return prompt_selection


async def main(argv=None) -> int:
    args = parse_args(argv)
    timings = CrawlTimings(
        switch_settle_ms=args.switch_settle_ms,
        scroll_settle_ms=args.scroll_settle_ms,
        max_scroll_attempts=args.max_scroll_attempts,
    )

    try:
        result = await crawl_gallery(
            target=args.profile,
            select=build_selector(args),
            headless=not args.headful,
            timings=timings,
            max_categories=args.max_games,
        )
    except UnsupportedSiteError as e:
        print(f"[ERR ] {e}")
        return 2
    except CrawlAborted as e:
        traceback.print_exception(e.__cause__ or e)
        result = e.result

    screenshots_path, games_path = write_results(result, args.out_dir, minimal=args.minimal)
    print(f"[OK] Extracted {len(result.records)} screenshots → {screenshots_path}")
    print(f"[OK] Catalogued {len(result.categories)} games → {games_path}")

    if result.failed_categories:
        print(f"[!] Skipped games: {', '.join(result.failed_categories)}")

    return 1 if result.aborted else 0


def cli():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
