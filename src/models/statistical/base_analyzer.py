"""
src/models/statistical/base_analyzer.py
Abstract base for the single-signal heuristics: shared fill, fallback and confidence.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from src.models.sampling import fill_to_count, resolve_rng
from src.schemas.lottery import DEFAULT_THRESHOLDS, Confidence, DrawRecord, PredictionResult
from src.utils.logger import get_logger

log = get_logger("model.statistical")

NO_HISTORY_EXPLANATION = (
    "No historical data is available for this draw; "
    "the numbers were generated at random."
)


class BaseAnalyzer(ABC):
    """Abstract base class for every heuristic that predicts from draw history."""

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.lo, self.hi = number_range
        self.count = count
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.rng = resolve_rng(rng)

    # ── Helpers ───────────────────────────────────────────────────

    def _fill(self, numbers: Sequence[int]) -> list[int]:
        return fill_to_count(numbers, self.count, (self.lo, self.hi), self.rng)

    def _confidence(self, analyzed_count: float) -> Confidence:
        return Confidence.from_sample_size(analyzed_count, self.thresholds)

    def _result(self, numbers: Sequence[int], explanation: str, confidence: Confidence) -> PredictionResult:
        return PredictionResult(
            method_name=self.method_name,
            predicted_numbers=self._fill(numbers),
            explanation=explanation,
            confidence=confidence,
        )

    def _random_result(self, explanation: str = NO_HISTORY_EXPLANATION) -> PredictionResult:
        log.warning(f"{self.method_name}: random fallback ({explanation})")
        return self._result([], explanation, Confidence.VERY_LOW)

    # ── Abstract interface ────────────────────────────────────────

    @property
    @abstractmethod
    def method_name(self) -> str:
        """Identifier of the heuristic, used for weighting and ordering."""
        ...

    @abstractmethod
    def predict(self, records: Sequence[DrawRecord]) -> PredictionResult:
        """Predict `count` numbers from records of a single category."""
        ...
