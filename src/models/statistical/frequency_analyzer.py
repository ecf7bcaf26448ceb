"""
src/models/statistical/frequency_analyzer.py
Hot-number picks: sample from the most frequent winning (or machine) numbers.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

import numpy as np

from src.models.sampling import sample_from_pool
from src.models.statistical.base_analyzer import BaseAnalyzer, log
from src.schemas.lottery import DrawRecord, PredictionResult


class FrequencyAnalyzer(BaseAnalyzer):
    """
    Count winning numbers and draw the prediction from the hottest ones.
    With source="machine" the machine draws are counted instead.
    """

    SOURCES = ("winning", "machine")

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        pool_min: int = 10,
        source: str = "winning",
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(number_range, count, thresholds, rng)
        self.pool_min = pool_min
        if source not in self.SOURCES:
            raise ValueError(f"Unknown number source: {source!r}")
        self.source = source

    @property
    def method_name(self) -> str:
        return "Frequency"

    def get_frequencies(self, records: Sequence[DrawRecord]) -> Counter:
        """Return {number: times drawn} for the configured source."""
        counter: Counter = Counter()
        for record in records:
            counter.update(getattr(record, f"{self.source}_numbers"))
        return counter

    def get_hot_numbers(self, records: Sequence[DrawRecord], top_n: int = 15) -> list[int]:
        return [n for n, _ in self.get_frequencies(records).most_common(top_n)]

    def predict(self, records: Sequence[DrawRecord]) -> PredictionResult:
        if not records:
            return self._random_result()

        ranked = [n for n, _ in self.get_frequencies(records).most_common()]
        if len(ranked) < self.count:
            numbers = ranked
            explanation = (
                f"Only {len(ranked)} distinct numbers were drawn in {len(records)} draws; "
                "the rest were completed at random."
            )
        else:
            # Sample from the hot pool, not the top N
            pool = ranked[: max(2 * self.count, self.pool_min)]
            numbers = sample_from_pool(pool, self.count, self.rng)
            explanation = (
                f"Random selection among the {len(pool)} most frequent {self.source} numbers "
                f"over {len(records)} draws."
            )

        result = self._result(numbers, explanation, self._confidence(len(records)))
        log.debug(f"Frequency picks ({self.source}): {result.predicted_numbers}")
        return result
