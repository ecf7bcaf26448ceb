"""
src/pipeline/prediction_generator.py
Run every heuristic for one draw category and assemble the prediction bundle.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

import numpy as np

from src.data.validation import scope_to_category
from src.models.ensemble_predictor import EnsemblePredictor
from src.models.sampling import resolve_rng
from src.models.statistical.association_analyzer import AssociationAnalyzer
from src.models.statistical.base_analyzer import BaseAnalyzer
from src.models.statistical.delay_analyzer import DelayAnalyzer
from src.models.statistical.distribution_analyzer import DistributionAnalyzer
from src.models.statistical.frequency_analyzer import FrequencyAnalyzer
from src.schemas.lottery import DrawRecord, PredictionBundle, PredictionResult
from src.utils.config import get_engine_config
from src.utils.logger import get_logger

log = get_logger("pipeline.generator")


def build_analyzers(
    config: dict[str, Any],
    rng: np.random.Generator,
    reference_date: date | None = None,
) -> list[BaseAnalyzer]:
    number_range = tuple(config["number_range"])
    count = config["pick_count"]
    thresholds = tuple(config["confidence_thresholds"])
    return [
        FrequencyAnalyzer(
            number_range=number_range,
            count=count,
            pool_min=config["frequency"]["pool_min"],
            thresholds=thresholds,
            rng=rng,
        ),
        DelayAnalyzer(
            number_range=number_range,
            count=count,
            unseen_factor=config["delay"]["unseen_factor"],
            reference_date=reference_date,
            thresholds=thresholds,
            rng=rng,
        ),
        AssociationAnalyzer(
            number_range=number_range,
            count=count,
            min_records=config["association"]["min_records"],
            pool_min=config["association"]["pool_min"],
            thresholds=thresholds,
            rng=rng,
        ),
        DistributionAnalyzer(
            number_range=number_range,
            count=count,
            range_width=config["distribution"]["range_width"],
            pool_cap_factor=config["distribution"]["pool_cap_factor"],
            thresholds=thresholds,
            rng=rng,
        ),
    ]


def build_ensemble(config: dict[str, Any], rng: np.random.Generator) -> EnsemblePredictor:
    return EnsemblePredictor(
        number_range=tuple(config["number_range"]),
        count=config["pick_count"],
        base_weights=config["ensemble"]["base_weights"],
        default_base_weight=config["ensemble"]["default_base_weight"],
        thresholds=tuple(config["confidence_thresholds"]),
        rng=rng,
    )


def predict_machine_numbers(
    records: Sequence[DrawRecord],
    config: dict[str, Any],
    rng: np.random.Generator,
) -> PredictionResult:
    """Frequency pick over the machine draws; random when no record carries one."""
    with_machine = [record for record in records if record.machine_numbers]
    analyzer = FrequencyAnalyzer(
        number_range=tuple(config["number_range"]),
        count=config["pick_count"],
        pool_min=config["frequency"]["pool_min"],
        source="machine",
        thresholds=tuple(config["confidence_thresholds"]),
        rng=rng,
    )
    return analyzer.predict(with_machine)


def order_results(hybrid: PredictionResult, results: Sequence[PredictionResult]) -> list[PredictionResult]:
    """Hybrid first, the rest by method name; the first result per name wins."""
    ordered: list[PredictionResult] = []
    seen: set[str] = set()
    for result in [hybrid, *sorted(results, key=lambda r: r.method_name)]:
        if result.method_name in seen:
            continue
        seen.add(result.method_name)
        ordered.append(result)
    return ordered


def predict(
    records: Sequence[DrawRecord],
    category: str,
    *,
    reference_date: date | None = None,
    rng: np.random.Generator | None = None,
    config: dict[str, Any] | None = None,
) -> PredictionBundle:
    """
    Full prediction flow for one category:
    1. Scope records to the category
    2. Run Frequency, Delay, Association, Distribution
    3. Combine them into the hybrid result
    4. Pick machine numbers from the machine draws
    5. Return the bundle, hybrid recommended
    """
    config = config or get_engine_config()
    rng = resolve_rng(rng)

    scoped = scope_to_category(records, category)
    log.info(f"[PREDICT] {category}: {len(scoped)} draws")

    results = [analyzer.predict(scoped) for analyzer in build_analyzers(config, rng, reference_date)]
    hybrid = build_ensemble(config, rng).combine(results, analyzed_count=len(scoped))
    machine = predict_machine_numbers(scoped, config, rng)

    bundle = PredictionBundle(
        category=category,
        all_results=order_results(hybrid, results),
        recommended=hybrid,
        machine_prediction=machine,
        analyzed_count=len(scoped),
    )
    log.info(f"[PREDICT] {category} → {hybrid.predicted_numbers} ({hybrid.confidence.label}), machine {machine.predicted_numbers}")
    return bundle
