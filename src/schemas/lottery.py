"""
src/schemas/lottery.py
Typed draw records, confidence levels and prediction outputs.
"""
from __future__ import annotations

import datetime as dt
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from src.utils.config import get_number_range, get_pick_count

DRAW_SIZE = 5
DEFAULT_THRESHOLDS: tuple[int, int, int] = (10, 50, 200)


class Confidence(IntEnum):
    """Ordinal reliability label, derived mostly from sample size."""

    VERY_LOW = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def from_sample_size(
        cls, analyzed_count: float, thresholds: tuple[int, int, int] = DEFAULT_THRESHOLDS
    ) -> Confidence:
        very_low, low, medium = thresholds
        if analyzed_count < very_low:
            return cls.VERY_LOW
        if analyzed_count < low:
            return cls.LOW
        if analyzed_count < medium:
            return cls.MEDIUM
        return cls.HIGH

    @property
    def weight(self) -> float:
        return _CONFIDENCE_WEIGHTS[self]

    @property
    def label(self) -> str:
        return _CONFIDENCE_LABELS[self]

    def promote(self) -> Confidence:
        return Confidence(min(self + 1, Confidence.HIGH))


_CONFIDENCE_WEIGHTS = {
    Confidence.VERY_LOW: 0.5,
    Confidence.LOW: 1.0,
    Confidence.MEDIUM: 1.5,
    Confidence.HIGH: 2.0,
}

_CONFIDENCE_LABELS = {
    Confidence.VERY_LOW: "Très faible",
    Confidence.LOW: "Faible",
    Confidence.MEDIUM: "Moyenne",
    Confidence.HIGH: "Élevée",
}


def _check_numbers(numbers: tuple[int, ...], what: str) -> tuple[int, ...]:
    lo, hi = get_number_range()
    if len(numbers) != DRAW_SIZE:
        raise ValueError(f"{what}: expected {DRAW_SIZE} numbers, got {len(numbers)}: {list(numbers)}")
    if len(set(numbers)) != len(numbers):
        raise ValueError(f"{what}: duplicate numbers: {list(numbers)}")
    if not all(lo <= n <= hi for n in numbers):
        raise ValueError(f"{what}: numbers out of range [{lo},{hi}]: {list(numbers)}")
    return numbers


class DrawRecord(BaseModel):
    """
    One historical draw of a category.

    Accepts the export format of the results site as well
    (draw_name / date / gagnants / machine).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: str = Field(..., min_length=1, alias="draw_name")
    date: dt.date
    winning_numbers: tuple[int, ...] = Field(..., alias="gagnants")
    machine_numbers: tuple[int, ...] = Field(default=(), alias="machine")

    @field_validator("winning_numbers")
    @classmethod
    def _validate_winning(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        return _check_numbers(v, "winning numbers")

    @field_validator("machine_numbers")
    @classmethod
    def _validate_machine(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        # [0, 0, 0, 0, 0] is how the site publishes "no machine draw"
        if len(v) == DRAW_SIZE and all(n == 0 for n in v):
            return ()
        if len(v) == 0:
            return v
        return _check_numbers(v, "machine numbers")


class PredictionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    method_name: str
    predicted_numbers: list[int]
    explanation: str
    confidence: Confidence

    @field_validator("predicted_numbers")
    @classmethod
    def _validate_predicted(cls, v: list[int]) -> list[int]:
        lo, hi = get_number_range()
        count = get_pick_count()
        if len(v) != count:
            raise ValueError(f"Expected {count} predicted numbers, got {len(v)}: {v}")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate predicted numbers: {v}")
        if not all(lo <= n <= hi for n in v):
            raise ValueError(f"Predicted numbers out of range [{lo},{hi}]: {v}")
        return sorted(v)

    @field_serializer("confidence")
    def _serialize_confidence(self, confidence: Confidence) -> str:
        return confidence.name


class PredictionBundle(BaseModel):
    """All heuristic results for one category, hybrid first, plus a machine-number pick."""

    model_config = ConfigDict(frozen=True)

    category: str
    all_results: list[PredictionResult]
    recommended: PredictionResult
    machine_prediction: PredictionResult
    analyzed_count: int
