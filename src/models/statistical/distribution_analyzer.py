"""
src/models/statistical/distribution_analyzer.py
Score decade ranges ([1,10], [11,20], ...) by how often they are drawn
and pick numbers from the busiest ones.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

import numpy as np

from src.models.sampling import sample_from_pool
from src.models.statistical.base_analyzer import BaseAnalyzer, log
from src.schemas.lottery import DRAW_SIZE, DrawRecord, PredictionResult


class DistributionAnalyzer(BaseAnalyzer):
    """Analyze how winning numbers spread across fixed-width ranges."""

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        range_width: int = 10,
        pool_cap_factor: int = 3,
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(number_range, count, thresholds, rng)
        self.range_width = range_width
        self.pool_cap = pool_cap_factor * count
        self.bands = [
            (start, min(start + range_width - 1, self.hi))
            for start in range(self.lo, self.hi + 1, range_width)
        ]

    @property
    def method_name(self) -> str:
        return "Distribution"

    def get_band(self, num: int) -> tuple[int, int] | None:
        for lo, hi in self.bands:
            if lo <= num <= hi:
                return lo, hi
        return None

    def get_band_averages(self, records: Sequence[DrawRecord]) -> dict[tuple[int, int], float]:
        """Average number of winning numbers per draw falling in each band."""
        counter: Counter = Counter()
        for record in records:
            for num in record.winning_numbers:
                band = self.get_band(num)
                if band:
                    counter[band] += 1
        n_draws = len(records)
        if n_draws == 0:
            return {band: 0.0 for band in self.bands}
        return {band: counter.get(band, 0) / n_draws for band in self.bands}

    def build_pool(self, averages: dict[tuple[int, int], float]) -> list[int]:
        """
        Walk bands from busiest to quietest, drawing random members of each
        in proportion to its average, until the pool holds pool_cap draws.
        """
        ranked = sorted(self.bands, key=lambda band: averages[band], reverse=True)
        pool: list[int] = []
        for lo, hi in ranked:
            if len(pool) >= self.pool_cap:
                break
            # round half up
            draws = max(1, int(averages[(lo, hi)] * self.count / DRAW_SIZE + 0.5))
            draws = min(draws, self.pool_cap - len(pool))
            pool.extend(int(n) for n in self.rng.integers(lo, hi + 1, size=draws))
        return pool

    def predict(self, records: Sequence[DrawRecord]) -> PredictionResult:
        if not records:
            return self._random_result()

        averages = self.get_band_averages(records)
        pool = self.build_pool(averages)
        numbers = sample_from_pool(pool, self.count, self.rng)

        busiest = max(self.bands, key=lambda band: averages[band])
        explanation = (
            f"Numbers drawn from the busiest ranges over {len(records)} draws; "
            f"{busiest[0]}-{busiest[1]} averages {averages[busiest]:.2f} numbers per draw."
        )
        # Rated one notch below the other heuristics for the same sample size
        confidence = self._confidence(len(records) / 2)

        result = self._result(numbers, explanation, confidence)
        log.debug(f"Distribution picks: {result.predicted_numbers}")
        return result
