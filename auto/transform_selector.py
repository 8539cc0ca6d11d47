"""
AutoAxis - Transform Selector
Chooses a linear / log / root transform for a numeric field from its skew.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from config.constants import (
    LOG_SKEW_THRESHOLD,
    LOG_SPREAD_RATIO,
    ROOT_SKEW_THRESHOLD,
    TRANSFORM_LINEAR,
    TRANSFORM_LOG,
    TRANSFORM_ROOT,
    TransformName,
)
from core.field import Field

__all__ = ["define_transform", "transform_for_skew"]


def define_transform(field: Field) -> TransformName:
    """
    Transform for the field, computed once and cached as its ``transform``
    property; later calls return the cached choice.
    """
    transform = field.str_property("transform")
    if transform is None:
        transform = transform_for_skew(
            field.num_property("skew"), field.min(), field.max()
        )
        field.set("transform", transform)
        logger.debug(f"define_transform({field.name}) -> {transform}")
    return transform


def transform_for_skew(
    skew: Optional[float],
    min_value: Optional[float],
    max_value: Optional[float],
) -> TransformName:
    """
    Skew rule:

    * no skew                                  → linear
    * skew > 2, min > 0 and max > 75 × min     → log
    * skew > 1 and min >= 0                    → root
    * otherwise                                → linear

    Log is tested first: it is the stronger transform with the stricter guard.
    """
    if skew is None:
        return TRANSFORM_LINEAR
    if min_value is None or max_value is None:
        return TRANSFORM_LINEAR
    if skew > LOG_SKEW_THRESHOLD and min_value > 0 and max_value > LOG_SPREAD_RATIO * min_value:
        return TRANSFORM_LOG
    if skew > ROOT_SKEW_THRESHOLD and min_value >= 0:
        return TRANSFORM_ROOT
    return TRANSFORM_LINEAR
