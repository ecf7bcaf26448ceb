"""
src/data/validation.py
Validate raw draw rows before they reach the engine, and scope them to one category.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import ValidationError

from src.schemas.lottery import DrawRecord
from src.utils.logger import get_logger

log = get_logger("data.validation")

REQUIRED_FIELDS = {"draw_name", "date", "gagnants"}


def validate_draw(record: dict[str, Any]) -> bool:
    """Validate a raw row (draw_name / date / gagnants / machine) before import."""
    if not REQUIRED_FIELDS.issubset(record.keys()):
        log.error(f"Missing fields: {REQUIRED_FIELDS - record.keys()}")
        return False
    try:
        DrawRecord.model_validate(record)
    except ValidationError as exc:
        log.error(f"Invalid draw {record.get('draw_name')} {record.get('date')}: {exc.error_count()} error(s)")
        for err in exc.errors():
            log.debug(f"  {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        return False
    return True


def normalize_draws(rows: Iterable[dict[str, Any]], category: str | None = None) -> list[DrawRecord]:
    """
    Build DrawRecords from raw rows: invalid rows are skipped, an optional
    category filter is applied, and only the first row per category+date is kept.
    Sorted newest first, then by category.
    """
    records: dict[tuple[str, str], DrawRecord] = {}
    skipped = 0
    for row in rows:
        if not validate_draw(row):
            skipped += 1
            continue
        record = DrawRecord.model_validate(row)
        if category and record.category != category:
            continue
        key = (record.category, record.date.isoformat())
        if key in records:
            log.warning(f"Duplicate draw {key[0]} on {key[1]} ignored.")
            continue
        records[key] = record

    if skipped:
        log.warning(f"{skipped} invalid row(s) skipped.")
    result = sorted(records.values(), key=lambda r: r.category)
    result.sort(key=lambda r: r.date, reverse=True)
    return result


def scope_to_category(records: Sequence[DrawRecord], category: str) -> list[DrawRecord]:
    """Keep only the records of `category`; the engine analyzes one category at a time."""
    scoped = [r for r in records if r.category == category]
    dropped = len(records) - len(scoped)
    if dropped:
        log.warning(f"{dropped} record(s) from other categories ignored for {category}.")
    return scoped
