"""
scripts/01_analyze_draw.py
Run predictions, statistics and (optionally) a number's regularity for one
draw category, from a JSON export of results.
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.analysis.regularity_reporter import analyze_regularity
from src.analysis.statistics_reporter import compute_statistics
from src.data.validation import normalize_draws
from src.pipeline.prediction_generator import predict
from src.utils.config import get_draw_name_by_slug, get_draw_names
from src.utils.logger import get_logger, set_log_level

log = get_logger("analyze_draw")


def resolve_draw_name(value: str) -> str:
    if value in get_draw_names():
        return value
    name = get_draw_name_by_slug(value)
    if name is None:
        raise argparse.ArgumentTypeError(f"Unknown draw: {value}")
    return name


def main():
    parser = argparse.ArgumentParser(description="Analyze one draw category")
    parser.add_argument("results", type=Path, help="JSON export: [{draw_name, date, gagnants, machine}, ...]")
    parser.add_argument("--draw", type=resolve_draw_name, required=True, help="Draw name or slug, e.g. 'diamant'")
    parser.add_argument("--number", type=int, help="Also analyze the regularity of this number")
    parser.add_argument("--seed", type=int, help="Seed for reproducible sampling")
    parser.add_argument("--today", type=date.fromisoformat, help="Reference date for delays (YYYY-MM-DD)")
    parser.add_argument("--verbose", action="store_true", help="Log analyzer picks (DEBUG)")
    args = parser.parse_args()
    if args.verbose:
        set_log_level("DEBUG")

    with open(args.results, "r", encoding="utf-8") as f:
        rows = json.load(f)
    records = normalize_draws(rows, category=args.draw)
    log.info(f"Loaded {len(records)} {args.draw} draws from {args.results}")

    rng = np.random.default_rng(args.seed)
    output = {
        "prediction": predict(records, args.draw, reference_date=args.today, rng=rng).model_dump(mode="json"),
        "statistics": compute_statistics(records, args.draw).model_dump(mode="json"),
    }
    if args.number is not None:
        output["regularity"] = analyze_regularity(records, args.number, args.draw).model_dump(mode="json")

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
