"""
AutoAxis - Numeric Extents
Value range and layout hints of one or more fields, as consumed by the scale
builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from loguru import logger

from auto.bin_estimator import optimal_bin_count
from config.constants import MIN_BIN_COUNT, TRANSFORM_LINEAR, TRANSFORMS, TransformName
from core.dates import DateUnit
from core.exceptions import InsufficientDataError, ScaleConstructionError
from core.field import Field

__all__ = ["NumericExtentDetail"]


@dataclass(frozen=True)
class NumericExtentDetail:
    """
    Extent of the data shown on a numeric axis.

    Attributes:
        low: Smallest value (days since the epoch for dates)
        high: Largest value
        date_unit: Finest date unit of the fields, when they hold dates
        transform: ``linear`` / ``log`` / ``root``
        optimal_bin_count: Histogram bin count hint
        granularity: Smallest gap between distinct values
    """

    low: float
    high: float
    date_unit: Optional[DateUnit] = None
    transform: TransformName = TRANSFORM_LINEAR
    optimal_bin_count: int = MIN_BIN_COUNT
    granularity: Optional[float] = None

    def __post_init__(self) -> None:
        if self.transform not in TRANSFORMS:
            raise ScaleConstructionError(
                f"Unknown transform '{self.transform}'",
                details={"allowed": list(TRANSFORMS)},
            )

    @classmethod
    def make_for_field(cls, field: Field) -> "NumericExtentDetail":
        return cls.make_for_fields([field])

    @classmethod
    def make_for_fields(cls, fields: Iterable[Field]) -> "NumericExtentDetail":
        """
        Combined extent of several fields sharing an axis.

        Only the cached ``transform`` of each field is read; when the fields
        disagree (or none has one) the extent is linear.

        Raises:
            InsufficientDataError: No field with a numeric value
        """
        fields = list(fields)
        numeric = [f for f in fields if f.is_numeric() and f.min() is not None]
        if not numeric:
            raise InsufficientDataError(
                "No numeric values to build an extent from",
                details={"fields": [f.name for f in fields]}
            )

        transforms = {f.str_property("transform") or TRANSFORM_LINEAR for f in numeric}
        transform = transforms.pop() if len(transforms) == 1 else TRANSFORM_LINEAR

        units: List[DateUnit] = [
            DateUnit(f.str_property("date_unit"))
            for f in numeric
            if f.is_date() and f.property("date_unit") is not None
        ]
        date_unit = min(units, key=DateUnit.ordered().index) if units else None

        granularities = [
            f.num_property("granularity") for f in numeric
            if f.num_property("granularity") is not None
        ]

        extent = cls(
            low=min(f.min() for f in numeric),
            high=max(f.max() for f in numeric),
            date_unit=date_unit,
            transform=transform,
            optimal_bin_count=max(optimal_bin_count(f) for f in numeric),
            granularity=min(granularities) if granularities else None,
        )
        logger.debug(f"extent for {[f.name for f in numeric]}: {extent}")
        return extent
