from gallery_scraper.config import CrawlTimings, DEFAULT_TIMINGS

HEIGHT_JS = "() => document.body.scrollHeight"


async def scroll_pass(page, timings: CrawlTimings = DEFAULT_TIMINGS) -> int:
    """
    Scrolls the window step by step until the distance travelled reaches the
    page height, re-reading the height on every step so freshly loaded rows
    extend the pass. Returns the number of steps taken.
    """
    travelled = 0
    steps = 0

    while steps < timings.max_scroll_steps:
        scroll_height = await page.evaluate(HEIGHT_JS)
        await page.evaluate("(y) => window.scrollBy(0, y)", timings.scroll_step_px)
        travelled += timings.scroll_step_px
        steps += 1
        await page.wait_for_timeout(timings.scroll_step_delay_ms)

        if travelled >= scroll_height:
            break

    return steps


async def scroll_until_stable(page, timings: CrawlTimings = DEFAULT_TIMINGS) -> bool:
    """
    Realizes an infinite-scroll list before it is harvested.

    Each round measures document height; an unchanged height means the list
    stopped growing. Otherwise one scroll pass runs and the page gets
    `scroll_settle_ms` to append rows. Returns False when the attempt budget
    runs out first, in which case callers harvest whatever is loaded.
    """
    prev_height = 0

    for attempt in range(timings.max_scroll_attempts):
        current_height = await page.evaluate(HEIGHT_JS)
        if current_height == prev_height:
            print(f"[*] Height stable at {current_height}px after {attempt} scroll round(s).")
            return True

        prev_height = current_height
        await scroll_pass(page, timings)
        await page.wait_for_timeout(timings.scroll_settle_ms)

    print(f"[*] Height still growing after {timings.max_scroll_attempts} rounds. Harvesting what is loaded.")
    return False
