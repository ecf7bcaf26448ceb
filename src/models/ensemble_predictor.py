"""
src/models/ensemble_predictor.py
Weighted voting ensemble: Frequency + Delay + Association + Distribution → hybrid pick.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from src.models.sampling import fill_to_count, resolve_rng
from src.models.statistical.base_analyzer import NO_HISTORY_EXPLANATION
from src.schemas.lottery import DEFAULT_THRESHOLDS, Confidence, PredictionResult
from src.utils.logger import get_logger

log = get_logger("ensemble")

HYBRID_METHOD = "Hybrid"

DEFAULT_BASE_WEIGHTS: dict[str, float] = {
    "Frequency": 1.2,
    "Delay": 1.2,
    "Association": 1.1,
}


class EnsemblePredictor:
    """
    Combines the single-signal heuristics by weighted voting: every number a
    heuristic proposes earns that heuristic's weight, the top scores win.
    """

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 90),
        count: int = 5,
        base_weights: dict[str, float] | None = None,
        default_base_weight: float = 1.0,
        thresholds: tuple[int, int, int] | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.number_range = number_range
        self.count = count
        self.base_weights = base_weights if base_weights is not None else dict(DEFAULT_BASE_WEIGHTS)
        self.default_base_weight = default_base_weight
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.rng = resolve_rng(rng)

    # ── Weights ───────────────────────────────────────────────────

    def get_weight(self, result: PredictionResult) -> float:
        base = self.base_weights.get(result.method_name, self.default_base_weight)
        return result.confidence.weight * base

    def get_scores(self, results: Sequence[PredictionResult]) -> tuple[dict[int, float], dict[int, int]]:
        """Returns ({number: summed weight}, {number: how many heuristics proposed it})."""
        scores: dict[int, float] = {}
        votes: dict[int, int] = {}
        for result in results:
            weight = self.get_weight(result)
            for num in result.predicted_numbers:
                scores[num] = scores.get(num, 0.0) + weight
                votes[num] = votes.get(num, 0) + 1
        return scores, votes

    # ── Confidence ────────────────────────────────────────────────

    def get_confidence(
        self,
        results: Sequence[PredictionResult],
        analyzed_count: int,
        agreement: float,
    ) -> Confidence:
        if not results or all(r.confidence == Confidence.VERY_LOW for r in results):
            return Confidence.VERY_LOW

        confidence = Confidence.from_sample_size(analyzed_count, self.thresholds)
        if confidence == Confidence.MEDIUM and agreement >= 3:
            confidence = confidence.promote()
        elif confidence == Confidence.LOW and agreement >= 2:
            confidence = confidence.promote()
        return confidence

    # ── Prediction ────────────────────────────────────────────────

    def combine(self, results: Sequence[PredictionResult], analyzed_count: int) -> PredictionResult:
        """Merge the heuristics' picks into one ranked, confidence-scored result."""
        if analyzed_count == 0:
            log.warning("No history, hybrid prediction falls back to random numbers.")
            return PredictionResult(
                method_name=HYBRID_METHOD,
                predicted_numbers=fill_to_count([], self.count, self.number_range, self.rng),
                explanation=NO_HISTORY_EXPLANATION,
                confidence=Confidence.VERY_LOW,
            )

        scores, votes = self.get_scores(results)
        ranked = sorted(scores, key=lambda n: scores[n], reverse=True)
        numbers = fill_to_count(ranked[: self.count], self.count, self.number_range, self.rng)

        agreement = sum(votes.get(n, 0) for n in numbers) / len(numbers)
        confidence = self.get_confidence(results, analyzed_count, agreement)

        methods = ", ".join(r.method_name for r in results)
        explanation = (
            f"Combines {len(results)} methods ({methods}) weighted by their confidence; "
            f"each selected number was proposed by {agreement:.1f} methods on average."
        )
        log.info(f"Hybrid prediction: {numbers} ({confidence.name}, agreement={agreement:.2f})")
        return PredictionResult(
            method_name=HYBRID_METHOD,
            predicted_numbers=numbers,
            explanation=explanation,
            confidence=confidence,
        )
