"""
src/models/statistical/association_analyzer.py
Pick numbers from the winning pairs that are drawn together most often.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations

import numpy as np

from src.models.sampling import sample_from_pool
from src.models.statistical.base_analyzer import BaseAnalyzer, log
from src.schemas.lottery import DrawRecord, PredictionResult


def count_pairs(records: Sequence[DrawRecord]) -> Counter:
    """
    Count every unordered pair of winning numbers, keyed (lower, higher).
    A 5-number draw contributes 10 pairs. Keys keep first-seen order.
    """
    counter: Counter = Counter()
    for record in records:
        counter.update(combinations(sorted(record.winning_numbers), 2))
    return counter


def pair_key(pair: tuple[int, int]) -> str:
    lower, higher = sorted(pair)
    return f"{lower}-{higher}"


class AssociationAnalyzer(BaseAnalyzer):
    """Numbers that tend to come out together."""

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        min_records: int = 5,
        pool_min: int = 15,
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(number_range, count, thresholds, rng)
        self.min_records = min_records
        self.pool_min = pool_min

    @property
    def method_name(self) -> str:
        return "Association"

    def get_top_pairs(self, records: Sequence[DrawRecord], top_n: int) -> list[tuple[int, int]]:
        return [pair for pair, _ in count_pairs(records).most_common(top_n)]

    def predict(self, records: Sequence[DrawRecord]) -> PredictionResult:
        if not records:
            return self._random_result()
        if len(records) < self.min_records:
            return self._random_result(
                f"Insufficient data: {len(records)} draws, at least {self.min_records} "
                "are needed for pair analysis; the numbers were generated at random."
            )

        top_pairs = self.get_top_pairs(records, max(2 * self.count, self.pool_min))
        pool = list(dict.fromkeys(num for pair in top_pairs for num in pair))
        numbers = sample_from_pool(pool, self.count, self.rng)
        explanation = (
            f"Random selection among the {len(pool)} numbers forming the "
            f"{len(top_pairs)} most frequent pairs over {len(records)} draws."
        )

        result = self._result(numbers, explanation, self._confidence(len(records)))
        log.debug(f"Association picks: {result.predicted_numbers}")
        return result
