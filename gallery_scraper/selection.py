from typing import Callable, List, Optional

from gallery_scraper.adapters.base import CategoryOption


def parse_selection(text: Optional[str], options: List[CategoryOption]) -> List[CategoryOption]:
    """
    "all" or a 1-based index → the games to crawl.
    Anything unusable (empty, not a number, out of range) falls back to all games.
    """
    choice = (text or "").strip().lower()
    if choice == "all" or not choice.isdecimal():
        return list(options)

    idx = int(choice)
    if 1 <= idx <= len(options):
        return [options[idx - 1]]

    return list(options)


def prompt_selection(
    options: List[CategoryOption],
    ask: Callable[[str], str] = input,
) -> List[CategoryOption]:
    if not options:
        return []

    print("\nGames with screenshots:")
    for idx, option in enumerate(options, start=1):
        print(f"  {idx:>3}. {option.label}")

    try:
        answer = ask("\nType 'all' or the number of one game [all]: ")
    except EOFError:
        answer = ""

    return parse_selection(answer, options)
