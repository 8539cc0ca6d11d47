"""
AutoAxis - Bin Estimator
Histogram bin count from Freedman–Diaconis and Scott's normal reference rule.
"""

from __future__ import annotations

import math

from loguru import logger

from config.constants import (
    BIN_ROUNDING_OFFSET,
    CUBE_ROOT_EXPONENT,
    FREEDMAN_DIACONIS_FACTOR,
    MIN_BIN_COUNT,
    SCOTT_FACTOR,
)
from core.field import Field

__all__ = ["optimal_bin_count"]


def optimal_bin_count(field: Field) -> int:
    """
    Optimal number of histogram bins (always at least 2).

    Both estimators give a bin width; the wider one wins, so noisy data is
    not over-fragmented. A field without a standard deviation (fewer than two
    valid values) or with a zero width gets the minimum.
    """
    stddev = field.num_property("stddev")
    if stddev is None:
        return MIN_BIN_COUNT

    root_n = field.valid() ** CUBE_ROOT_EXPONENT
    h1 = FREEDMAN_DIACONIS_FACTOR * (field.num_property("q3") - field.num_property("q1")) / root_n
    h2 = SCOTT_FACTOR * stddev / root_n
    h = max(h1, h2)

    if h == 0:
        return MIN_BIN_COUNT

    # rounded half-up
    raw = (field.max() - field.min()) / h + BIN_ROUNDING_OFFSET
    bins = max(MIN_BIN_COUNT, int(math.floor(raw + 0.5)))
    logger.debug(f"optimal_bin_count({field.name}): fd={h1:.4g}, scott={h2:.4g} -> {bins}")
    return bins
