"""
src/analysis/regularity_reporter.py
Regularity of one number: what comes out with it, and what comes out in the next draw.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

from src.analysis.statistics_reporter import get_top_numbers
from src.data.validation import scope_to_category
from src.schemas.lottery import DrawRecord
from src.schemas.statistics import RegularityReport
from src.utils.config import get_engine_config
from src.utils.logger import get_logger

log = get_logger("analysis.regularity")


def analyze_regularity(
    records: Sequence[DrawRecord],
    target_number: int,
    category: str,
    config: dict[str, Any] | None = None,
) -> RegularityReport:
    """
    Scan the category's draws oldest first. For each draw containing the
    target: count the other winning numbers (co-occurrence) and the winning
    numbers of the following draw other than the target, if any (next draw).
    Top lists rank by count, ties by ascending number.
    """
    config = config or get_engine_config()
    top_n = config["regularity"]["top_n"]

    # sorted() is stable: same-date draws keep their input order
    ordered = sorted(scope_to_category(records, category), key=lambda r: r.date)

    occurrences = 0
    co_occurrence: Counter = Counter()
    next_draw: Counter = Counter()
    for idx, record in enumerate(ordered):
        if target_number not in record.winning_numbers:
            continue
        occurrences += 1
        co_occurrence.update(n for n in record.winning_numbers if n != target_number)
        if idx + 1 < len(ordered):
            next_draw.update(n for n in ordered[idx + 1].winning_numbers if n != target_number)

    if occurrences == 0:
        log.info(f"[REGULARITY] {target_number} never drawn in {len(ordered)} {category} draws.")
    else:
        log.info(f"[REGULARITY] {target_number} drawn {occurrences}x in {len(ordered)} {category} draws.")

    return RegularityReport(
        category=category,
        target_number=target_number,
        occurrence_count=occurrences,
        co_occurrence=dict(co_occurrence),
        next_draw=dict(next_draw),
        most_co_occurring=get_top_numbers(co_occurrence, top_n),
        most_frequent_next_draw=get_top_numbers(next_draw, top_n),
    )
