"""
src/utils/config.py
Load env vars, engine parameters and the weekly draw schedule.
"""
import json
import os
import re
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT / "config"

# ── Files ─────────────────────────────────────────────────────────
ENGINE_CONFIG_FILE: str = os.getenv("ENGINE_CONFIG_FILE", "engine_params.json")
DRAW_SCHEDULE_FILE: str = "draw_schedule.json"

_config_cache: dict[str, Any] = {}


def _load_json(filename: str) -> Any:
    if filename in _config_cache:
        return _config_cache[filename]
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    _config_cache[filename] = data
    return data


def get_engine_config() -> dict[str, Any]:
    """Load and cache the engine parameters JSON."""
    config = _load_json(ENGINE_CONFIG_FILE)
    if "number_range" not in config or "pick_count" not in config:
        raise ValueError(f"{ENGINE_CONFIG_FILE} must define number_range and pick_count")
    return config


def get_number_range() -> tuple[int, int]:
    lo, hi = get_engine_config()["number_range"]
    return lo, hi


def get_pick_count() -> int:
    """How many numbers each heuristic predicts (5 for every draw)."""
    return get_engine_config().get("pick_count", 5)


# ── Draw schedule ─────────────────────────────────────────────────

def get_draw_schedule() -> dict[str, dict[str, str]]:
    """Return {day: {time: draw_name}}, e.g. {'Lundi': {'10H': 'Reveil', ...}}."""
    return _load_json(DRAW_SCHEDULE_FILE)


def get_draw_names() -> list[str]:
    """Sorted list of every distinct draw name in the schedule."""
    names = {name for day in get_draw_schedule().values() for name in day.values()}
    return sorted(names)


def slugify_draw_name(name: str) -> str:
    slug = re.sub(r"\s+", "-", name.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def get_draw_name_by_slug(slug: str) -> str | None:
    for name in get_draw_names():
        if slugify_draw_name(name) == slug:
            return name
    return None
