"""
src/models/sampling.py
Random-source helpers shared by every heuristic's fallback path.
"""
from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def resolve_rng(rng: np.random.Generator | None = None) -> np.random.Generator:
    """Use the injected generator, or a fresh entropy-seeded one."""
    return rng if rng is not None else np.random.default_rng()


def unique_random_numbers(
    count: int,
    lo: int,
    hi: int,
    excluding: Iterable[int] = (),
    rng: np.random.Generator | None = None,
) -> list[int]:
    """
    Draw `count` distinct numbers uniformly from [lo, hi], skipping `excluding`.
    Returns fewer than `count` only when the range itself is exhausted.
    """
    excluded = set(excluding)
    available = [n for n in range(lo, hi + 1) if n not in excluded]
    size = min(count, len(available))
    if size <= 0:
        return []
    picks = resolve_rng(rng).choice(available, size=size, replace=False)
    return [int(n) for n in picks]


def sample_from_pool(pool: Iterable[int], count: int, rng: np.random.Generator | None = None) -> list[int]:
    """Sample up to `count` distinct members of a candidate pool, without replacement."""
    distinct = list(dict.fromkeys(pool))
    size = min(count, len(distinct))
    if size == 0:
        return []
    picks = resolve_rng(rng).choice(distinct, size=size, replace=False)
    return [int(n) for n in picks]


def fill_to_count(
    numbers: Iterable[int],
    count: int,
    number_range: tuple[int, int],
    rng: np.random.Generator | None = None,
) -> list[int]:
    """
    Normalize a candidate list to exactly `count` distinct in-range numbers,
    sorted ascending. Duplicates are dropped, the shortfall is random-filled.
    """
    lo, hi = number_range
    picked = [n for n in dict.fromkeys(numbers) if lo <= n <= hi][:count]
    if len(picked) < count:
        picked += unique_random_numbers(count - len(picked), lo, hi, excluding=picked, rng=rng)
    return sorted(picked)
