import json
from pathlib import Path
from typing import Tuple

from gallery_scraper.config import GAMES_FILE, SCREENSHOTS_FILE
from gallery_scraper.pipeline import RunResult


def screenshot_rows(result: RunResult, minimal: bool = False) -> list[dict]:
    if minimal:
        return [{"url": r.resource_url} for r in result.records]
    return [{"gameId": r.category_ref, "url": r.resource_url} for r in result.records]


def game_rows(result: RunResult) -> list[dict]:
    return [{"id": c.id, "name": c.name} for c in result.categories]


def _dump(path: Path, rows: list[dict]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(rows, f, ensure_ascii=False, indent=2)


def write_results(result: RunResult, out_dir: str | Path, minimal: bool = False) -> Tuple[Path, Path]:
    """Writes screenshots.json and games.json under `out_dir` (created if needed)."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    screenshots_path = out / SCREENSHOTS_FILE
    games_path = out / GAMES_FILE
    _dump(screenshots_path, screenshot_rows(result, minimal=minimal))
    _dump(games_path, game_rows(result))

    return screenshots_path, games_path
