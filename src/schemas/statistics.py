"""Pydantic schemas for descriptive statistics and regularity reports."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OddEvenStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    average_odds: float
    average_evens: float
    draws_with_x_odds: dict[str, int]  # "0".."5" -> number of draws


class SumStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    average_sum: float
    min_sum: int | None = None
    max_sum: int | None = None
    sum_frequencies: dict[int, int]


class StatisticsReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    analyzed_count: int
    winning_frequencies: dict[int, int]
    machine_frequencies: dict[int, int]
    most_frequent_winning: list[int]
    least_frequent_winning: list[int]
    most_frequent_machine: list[int]
    least_frequent_machine: list[int]
    winning_pair_frequencies: dict[str, int]  # "lower-higher" -> count
    most_frequent_pairs: list[str]
    odd_even: OddEvenStats
    sums: SumStats


class RegularityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    target_number: int
    occurrence_count: int
    co_occurrence: dict[int, int]
    next_draw: dict[int, int]
    most_co_occurring: list[int]
    most_frequent_next_draw: list[int]
