"""
src/analysis/statistics_reporter.py
Descriptive statistics for one draw category: number and pair frequencies,
odd/even split and sums of the winning numbers. No randomness.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from src.data.validation import scope_to_category
from src.models.statistical.association_analyzer import count_pairs, pair_key
from src.schemas.lottery import DRAW_SIZE, DrawRecord
from src.schemas.statistics import OddEvenStats, StatisticsReport, SumStats
from src.utils.config import get_engine_config
from src.utils.logger import get_logger

log = get_logger("analysis.statistics")


def round_half_up(value: float, places: int = 2) -> float:
    """Round exact halves away from zero: 0.125 -> 0.13."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def get_top_numbers(frequencies: dict[int, int], n: int, ascending: bool = False) -> list[int]:
    """
    Most (or least) frequent numbers. Every number tied with the n-th count
    is kept before truncating to n; equal counts rank by ascending number.
    """
    sign = 1 if ascending else -1
    ranked = sorted(frequencies.items(), key=lambda item: (sign * item[1], item[0]))
    limit = min(n, len(ranked))
    if limit == 0:
        return []

    threshold = ranked[limit - 1][1]
    if ascending:
        kept = [num for num, freq in ranked if freq <= threshold]
    else:
        kept = [num for num, freq in ranked if freq >= threshold]
    return kept[:n]


def get_odd_even_stats(records: Sequence[DrawRecord]) -> OddEvenStats:
    draws_with_x_odds = {str(k): 0 for k in range(DRAW_SIZE + 1)}
    total_odds = 0
    total_evens = 0
    for record in records:
        odds = sum(1 for num in record.winning_numbers if num % 2 == 1)
        total_odds += odds
        total_evens += len(record.winning_numbers) - odds
        draws_with_x_odds[str(odds)] = draws_with_x_odds.get(str(odds), 0) + 1

    n_draws = len(records)
    return OddEvenStats(
        average_odds=round_half_up(total_odds / n_draws) if n_draws else 0,
        average_evens=round_half_up(total_evens / n_draws) if n_draws else 0,
        draws_with_x_odds=draws_with_x_odds,
    )


def get_sum_stats(records: Sequence[DrawRecord]) -> SumStats:
    sum_frequencies: Counter = Counter()
    min_sum: int | None = None
    max_sum: int | None = None
    total = 0
    for record in records:
        draw_sum = sum(record.winning_numbers)
        total += draw_sum
        min_sum = draw_sum if min_sum is None else min(min_sum, draw_sum)
        max_sum = draw_sum if max_sum is None else max(max_sum, draw_sum)
        sum_frequencies[draw_sum] += 1

    n_draws = len(records)
    return SumStats(
        average_sum=round_half_up(total / n_draws) if n_draws else 0,
        min_sum=min_sum,
        max_sum=max_sum,
        sum_frequencies=dict(sum_frequencies),
    )


def compute_statistics(
    records: Sequence[DrawRecord],
    category: str,
    config: dict[str, Any] | None = None,
) -> StatisticsReport:
    """Build the full statistics report for `category`."""
    config = config or get_engine_config()
    top_n = config["statistics"]["top_n"]
    top_pairs = config["statistics"]["top_pairs"]

    scoped = scope_to_category(records, category)

    winning: Counter = Counter()
    machine: Counter = Counter()
    for record in scoped:
        winning.update(record.winning_numbers)
        machine.update(record.machine_numbers)

    pairs = count_pairs(scoped)

    report = StatisticsReport(
        category=category,
        analyzed_count=len(scoped),
        winning_frequencies=dict(winning),
        machine_frequencies=dict(machine),
        most_frequent_winning=get_top_numbers(winning, top_n),
        least_frequent_winning=get_top_numbers(winning, top_n, ascending=True),
        most_frequent_machine=get_top_numbers(machine, top_n),
        least_frequent_machine=get_top_numbers(machine, top_n, ascending=True),
        winning_pair_frequencies={pair_key(pair): cnt for pair, cnt in pairs.items()},
        most_frequent_pairs=[pair_key(pair) for pair, _ in pairs.most_common(top_pairs)],
        odd_even=get_odd_even_stats(scoped),
        sums=get_sum_stats(scoped),
    )
    log.info(
        f"[STATS] {category}: {report.analyzed_count} draws, "
        f"top {report.most_frequent_winning}, avg sum {report.sums.average_sum}"
    )
    return report
