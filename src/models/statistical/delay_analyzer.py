"""
src/models/statistical/delay_analyzer.py
Score numbers by their delay (days since last appearance).
Numbers absent the longest are "overdue".
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import numpy as np

from src.models.statistical.base_analyzer import BaseAnalyzer, log
from src.schemas.lottery import DrawRecord, PredictionResult


class DelayAnalyzer(BaseAnalyzer):
    """Pick the numbers that have gone the longest without being drawn."""

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        unseen_factor: int = 100,
        reference_date: date | None = None,
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(number_range, count, thresholds, rng)
        self.reference_date = reference_date
        # Larger than any real delay in days
        self.unseen_delay = unseen_factor * (self.hi - self.lo + 1)

    @property
    def method_name(self) -> str:
        return "Delay"

    def get_last_seen(self, records: Sequence[DrawRecord]) -> dict[int, date]:
        """Returns {number: most recent draw date} for every number ever drawn."""
        last_seen: dict[int, date] = {}
        for record in records:
            for num in record.winning_numbers:
                if num not in last_seen or record.date > last_seen[num]:
                    last_seen[num] = record.date
        return last_seen

    def get_delays(self, records: Sequence[DrawRecord]) -> dict[int, int]:
        """
        Returns {number: days since last appearance} for all numbers in range.
        If never seen, delay = unseen_delay.
        """
        today = self.reference_date or date.today()
        last_seen = self.get_last_seen(records)
        return {
            num: (today - last_seen[num]).days if num in last_seen else self.unseen_delay
            for num in range(self.lo, self.hi + 1)
        }

    def get_overdue_numbers(self, records: Sequence[DrawRecord], top_n: int = 15) -> list[int]:
        delays = self.get_delays(records)
        return sorted(delays, key=lambda n: delays[n], reverse=True)[:top_n]

    def predict(self, records: Sequence[DrawRecord]) -> PredictionResult:
        if not records:
            return self._random_result()

        delays = self.get_delays(records)
        overdue = self.get_overdue_numbers(records, top_n=self.count)
        described = ", ".join(
            f"{n} (never drawn)" if delays[n] == self.unseen_delay else f"{n} ({delays[n]} days)"
            for n in overdue
        )
        explanation = f"Numbers absent the longest over {len(records)} draws: {described}."

        result = self._result(overdue, explanation, self._confidence(len(records)))
        log.debug(f"Delay picks: {result.predicted_numbers}")
        return result
