# auto/type_inferencer.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Type Inferencer                                               ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ List detection (variable-length, category-reducing lists)             ║
║  ✓ Sampled numeric / date majority vote                                  ║
║  ✓ Year detection for numeric columns                                    ║
║  ✓ Injectable random source                                              ║
╚════════════════════════════════════════════════════════════════════════════╝

Decision order for a field:
```
    synthetic / date / already a list  → unchanged
    to_list(field) accepted by good_lists → list field
    numeric (or > 50% of sample numeric) → numeric, or year dates
    > 50% of sample parses as dates     → date field
    otherwise                           → unchanged
```

Both sampling passes walk the same random permutation of rows and stop after
50 non-null values.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterator, Optional, Sequence

import numpy as np
from loguru import logger

from config.constants import (
    FRACTION_TO_CONVERT,
    INTEGER_TOLERANCE,
    LIST_MIN_VALID,
    LIST_SMALL_SAMPLE,
    SAMPLE_CAP,
    YEAR_HIGH,
    YEAR_LOW,
)
from core.data import as_date, as_numeric, to_date, to_list, to_numeric
from core.field import Field

__all__ = ["convert", "good_lists", "is_yearly"]


# ═══════════════════════════════════════════════════════════════════════════
# Conversion
# ═══════════════════════════════════════════════════════════════════════════

def convert(field: Field, rng: Optional[np.random.Generator] = None) -> Field:
    """
    Best typed version of a field (or the field itself).

    Args:
        field: Field to inspect
        rng: Random source for the sampling order (fresh default generator
            when omitted)
    """
    if field.is_synthetic() or field.is_date():
        return field
    if field.is_property("list"):
        return field

    as_list = to_list(field)
    if good_lists(as_list):
        logger.debug(f"convert({field.name}) -> list")
        return as_list

    rng = rng if rng is not None else np.random.default_rng()
    order = rng.permutation(field.row_count())

    if field.is_numeric():
        numeric: Optional[Field] = field
    else:
        hits, sampled = _vote(field, order, _is_numeric_value)
        numeric = to_numeric(field) if hits > FRACTION_TO_CONVERT * sampled else None
        logger.debug(f"convert({field.name}): {hits}/{sampled} sampled values numeric")

    if numeric is not None:
        if is_yearly(numeric):
            logger.debug(f"convert({field.name}) -> date (years)")
            return to_date(numeric, "year")
        logger.debug(f"convert({field.name}) -> numeric")
        return numeric

    hits, sampled = _vote(field, order, lambda v: as_date(v) is not None)
    logger.debug(f"convert({field.name}): {hits}/{sampled} sampled values dates")
    if hits > FRACTION_TO_CONVERT * sampled:
        logger.debug(f"convert({field.name}) -> date")
        return to_date(field)

    return field


def _is_numeric_value(value) -> bool:
    return not isinstance(value, date) and as_numeric(value) is not None


def _sample(field: Field, order: Sequence[int]) -> Iterator:
    """Non-null values in permutation order, at most SAMPLE_CAP of them."""
    taken = 0
    for row in order:
        if taken >= SAMPLE_CAP:
            return
        value = field.value(int(row))
        if value is None:
            continue
        taken += 1
        yield value


def _vote(field: Field, order: Sequence[int], accept: Callable) -> tuple:
    hits = sampled = 0
    for value in _sample(field, order):
        sampled += 1
        if accept(value):
            hits += 1
    return hits, sampled


# ═══════════════════════════════════════════════════════════════════════════
# Heuristics
# ═══════════════════════════════════════════════════════════════════════════

def good_lists(field: Field) -> bool:
    """
    Whether a list-converted field is worth keeping as a list.

    Needs at least 3 valid rows and two rows of different list length. With
    20 or more valid rows the distinct items must also be few: their count
    squared below twice the valid count.
    """
    n_valid = field.valid()
    if n_valid < LIST_MIN_VALID:
        return False

    length = -1
    # scan starts at row 1
    for row in range(1, field.row_count()):
        items = field.value(row)
        if items is None:
            continue
        if length < 0:
            length = len(items)
        elif len(items) != length:
            if n_valid < LIST_SMALL_SAMPLE:
                return True
            n_list = len(field.property("list_categories"))
            return n_list * n_list < n_valid * 2
    return False


def is_yearly(field: Field) -> bool:
    """
    Whether a numeric field looks like calendar years: the quartiles sit in
    1600..2100 and the values are whole numbers apart.
    """
    q1 = field.num_property("q1")
    q3 = field.num_property("q3")
    if q1 is None or q3 is None:
        return False
    if q1 < YEAR_LOW or q3 > YEAR_HIGH:
        return False
    d = field.num_property("granularity")
    return d is not None and abs(d - round(d)) < INTEGER_TOLERANCE
