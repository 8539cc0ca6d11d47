"""
AutoAxis - Scale Builder
Picks the scale constructor (date / log / linear) for an extent and prepares
its arguments.
"""

from __future__ import annotations

import math
from typing import List

from loguru import logger

from config.constants import MAX_AUTO_TICK_BINS, TRANSFORM_LOG, TRANSFORM_ROOT
from scales.extent import NumericExtentDetail
from scales.numeric_scale import NumericScale

__all__ = ["make_numeric_scale"]


def make_numeric_scale(
    extent: NumericExtentDetail,
    nice: bool,
    pad_fraction: List[float],
    include_zero_tolerance: float,
    desired_tick_count: int,
    for_binning: bool,
) -> NumericScale:
    """
    Build the numeric scale for an extent.

    Dates win over any transform. A root transform draws values near zero
    wider than a linear axis would, so the low-end padding and the zero
    tolerance are shrunk by the ratio of the linear to the root position of
    ``low``. Note that ``pad_fraction[0]`` is updated in place in that case.

    Args:
        extent: Range and hints of the data
        nice: Round bounds to whole tick steps
        pad_fraction: ``[low, high]`` padding fractions (mutable)
        include_zero_tolerance: Fraction of white space allowed to reach zero
        desired_tick_count: Target tick count; values < 1 mean "automatic"
            (the optimal bin count, at most 20, plus one)
        for_binning: Tick steps never finer than the data granularity
    """
    if desired_tick_count < 1:
        desired_tick_count = min(extent.optimal_bin_count, MAX_AUTO_TICK_BINS) + 1

    if extent.date_unit is not None:
        return NumericScale.make_date_scale(extent, nice, pad_fraction, desired_tick_count)

    if extent.transform == TRANSFORM_LOG:
        return NumericScale.make_log_scale(
            extent, nice, pad_fraction, include_zero_tolerance, desired_tick_count
        )

    if extent.transform == TRANSFORM_ROOT and extent.low > 0:
        scaling = (extent.low / extent.high) / (math.sqrt(extent.low) / math.sqrt(extent.high))
        include_zero_tolerance *= scaling
        pad_fraction[0] *= scaling
        logger.debug(f"root scaling {scaling:.4g} applied to low padding and zero tolerance")

    return NumericScale.make_linear_scale(
        extent, nice, include_zero_tolerance, pad_fraction, desired_tick_count, for_binning
    )
