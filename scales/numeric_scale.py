# scales/numeric_scale.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Numeric Scales                                                ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Linear scales (zero pinning, padding, 1-2-5 tick steps)               ║
║  ✓ Log scales (decade bounds, 2× / 5× fill for short ranges)             ║
║  ✓ Date scales (calendar-unit ticks, years 1..9999)                      ║
║  ✓ Immutable result object                                               ║
╚════════════════════════════════════════════════════════════════════════════╝

A scale is built from a :class:`~scales.extent.NumericExtentDetail` and a few
layout knobs:

    nice                    round the bounds outward to whole tick steps
    pad_fraction            [low, high] fraction of the span added as margin
    include_zero_tolerance  pin an end to zero when that adds at most this
                            fraction of white space
    desired_tick_count      target number of ticks (>= 1)
    for_binning             tick step never finer than the data granularity

Date scales work in days since 1970-01-01; their divisions are day numbers and
:meth:`NumericScale.division_dates` gives them back as datetimes.

Usage:
```python
    from scales.extent import NumericExtentDetail
    from scales.numeric_scale import NumericScale

    extent = NumericExtentDetail(low=3.2, high=97.0)
    scale = NumericScale.make_linear_scale(extent, True, 0.1, [0.0, 0.0], 6)
    scale.divisions   # (0.0, 20.0, 40.0, 60.0, 80.0, 100.0)
```
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from config.constants import NICE_STEP_MULTIPLIERS
from core.dates import DateUnit, from_days, to_days
from core.exceptions import ScaleConstructionError, wrap_exceptions

if TYPE_CHECKING:
    from scales.extent import NumericExtentDetail

__all__ = ["ScaleType", "NumericScale", "nice_step"]


class ScaleType:
    LINEAR = "linear"
    LOG = "log"
    DATE = "date"


_EPS = 1e-9


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def nice_step(raw: float) -> float:
    """Smallest 1-2-5 × 10^k value >= ``raw``."""
    if not math.isfinite(raw) or raw <= 0:
        return 1.0
    base = 10.0 ** math.floor(math.log10(raw))
    for m in NICE_STEP_MULTIPLIERS:
        candidate = m * base
        if candidate >= raw * (1 - _EPS):
            return float(candidate)
    return float(NICE_STEP_MULTIPLIERS[-1] * base)


def _pad_pair(pad_fraction: Sequence[float]) -> Tuple[float, float]:
    if not pad_fraction:
        return 0.0, 0.0
    low = float(pad_fraction[0])
    high = float(pad_fraction[1]) if len(pad_fraction) > 1 else low
    return low, high


def _extent_context(args: tuple, kwargs: dict) -> dict:
    extent = args[1] if len(args) > 1 else kwargs.get("extent")
    return {"low": getattr(extent, "low", None), "high": getattr(extent, "high", None)}


def _checked(extent: "NumericExtentDetail") -> Tuple[float, float]:
    low, high = extent.low, extent.high
    if low is None or high is None or not (math.isfinite(low) and math.isfinite(high)):
        raise ScaleConstructionError(
            "Scale bounds must be finite",
            details={"low": low, "high": high}
        )
    if low > high:
        low, high = high, low
    return float(low), float(high)


def _widen(low: float, high: float) -> Tuple[float, float]:
    if high > low:
        return low, high
    delta = abs(low) * 0.5 if low else 1.0
    return low - delta, high + delta


def _pin_zero(low: float, high: float, tolerance: float) -> Tuple[float, float]:
    if low > 0 and low / high <= tolerance:
        return 0.0, high
    if high < 0 and high / low <= tolerance:
        return low, 0.0
    return low, high


def _pad(low: float, high: float, pad_low: float, pad_high: float) -> Tuple[float, float]:
    span = high - low
    new_low = low - span * pad_low
    new_high = high + span * pad_high
    # padding never crosses zero
    if low >= 0 > new_low:
        new_low = 0.0
    if high <= 0 < new_high:
        new_high = 0.0
    return new_low, new_high


def _ticks(low: float, high: float, step: float) -> Tuple[float, ...]:
    start = math.ceil(low / step - _EPS)
    end = math.floor(high / step + _EPS)
    ticks = np.arange(start, end + 1, dtype=np.float64) * step
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * _EPS)] = 0.0
    return tuple(float(t) for t in ticks)


# ═══════════════════════════════════════════════════════════════════════════
# Scale
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class NumericScale:
    """
    📏 **Axis Scale**

    Attributes:
        type: ``linear`` / ``log`` / ``date``
        min: Domain start (days since the epoch for dates)
        max: Domain end
        divisions: Tick positions, ascending
        granularity: Data granularity carried from the extent
        date_unit: Tick unit of date scales
    """

    type: str
    min: float
    max: float
    divisions: Tuple[float, ...]
    granularity: Optional[float] = None
    date_unit: Optional[DateUnit] = None

    # ───────────────────────────────────────────────────────────────────
    # Accessors
    # ───────────────────────────────────────────────────────────────────

    def is_date(self) -> bool:
        return self.type == ScaleType.DATE

    def division_dates(self) -> List[datetime]:
        """Tick positions as datetimes (date scales only)."""
        if not self.is_date():
            raise ScaleConstructionError(
                f"{self.type} scale has no date divisions"
            )
        return [from_days(d) for d in self.divisions]

    # ───────────────────────────────────────────────────────────────────
    # Linear
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    @wrap_exceptions(
        to=ScaleConstructionError,
        message="Linear scale construction failed",
        context_builder=_extent_context,
    )
    def make_linear_scale(
        cls,
        extent: "NumericExtentDetail",
        nice: bool,
        include_zero_tolerance: float,
        pad_fraction: Sequence[float],
        desired_tick_count: int,
        for_binning: bool = False,
    ) -> "NumericScale":
        low, high = _widen(*_checked(extent))
        low, high = _pin_zero(low, high, include_zero_tolerance)
        low, high = _pad(low, high, *_pad_pair(pad_fraction))

        intervals = max(int(desired_tick_count) - 1, 1)
        step = nice_step((high - low) / intervals)
        if for_binning and extent.granularity and step < extent.granularity:
            step = float(extent.granularity)

        if nice:
            low = math.floor(low / step + _EPS) * step
            high = math.ceil(high / step - _EPS) * step

        divisions = _ticks(low, high, step)
        logger.debug(
            f"linear scale [{low:g}, {high:g}] step={step:g} ticks={len(divisions)}"
        )
        return cls(ScaleType.LINEAR, low, high, divisions, extent.granularity)

    # ───────────────────────────────────────────────────────────────────
    # Log
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    @wrap_exceptions(
        to=ScaleConstructionError,
        message="Log scale construction failed",
        context_builder=_extent_context,
    )
    def make_log_scale(
        cls,
        extent: "NumericExtentDetail",
        nice: bool,
        pad_fraction: Sequence[float],
        include_zero_tolerance: float,
        desired_tick_count: int,
    ) -> "NumericScale":
        low, high = _checked(extent)
        if low <= 0:
            logger.warning(
                f"log scale needs a positive low bound (got {low:g}); using linear"
            )
            return cls.make_linear_scale(
                extent, nice, include_zero_tolerance, pad_fraction, desired_tick_count
            )

        # all layout happens on decade exponents; pinning "zero" means value 1
        lo, hi = _widen(math.log10(low), math.log10(high))
        lo, hi = _pin_zero(lo, hi, include_zero_tolerance)
        pad_low, pad_high = _pad_pair(pad_fraction)
        span = hi - lo
        lo, hi = lo - span * pad_low, hi + span * pad_high

        if nice:
            lo = math.floor(lo + _EPS)
            hi = math.ceil(hi - _EPS)

        divisions = _log_ticks(lo, hi)
        if len(divisions) < 2:
            # less than a decade without a 1-2-5 mark: plain linear ticks
            low, high = 10 ** lo, 10 ** hi
            step = nice_step((high - low) / max(int(desired_tick_count) - 1, 1))
            divisions = tuple(t for t in _ticks(low, high, step) if t > 0)

        logger.debug(
            f"log scale [1e{lo:g}, 1e{hi:g}] ticks={len(divisions)}"
        )
        return cls(ScaleType.LOG, float(10 ** lo), float(10 ** hi), divisions, extent.granularity)

    # ───────────────────────────────────────────────────────────────────
    # Date
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    @wrap_exceptions(
        to=ScaleConstructionError,
        message="Date scale bounds outside the supported calendar range",
        context_builder=_extent_context,
    )
    def make_date_scale(
        cls,
        extent: "NumericExtentDetail",
        nice: bool,
        pad_fraction: Sequence[float],
        desired_tick_count: int,
    ) -> "NumericScale":
        low, high = _checked(extent)
        if high <= low:
            delta = (extent.date_unit or DateUnit.DAY).approx_days
            low, high = low - delta, high + delta

        pad_low, pad_high = _pad_pair(pad_fraction)
        span = high - low
        low, high = low - span * pad_low, high + span * pad_high

        unit = DateUnit.best_for(high - low, desired_tick_count, minimum=extent.date_unit)

        if nice:
            low = to_days(unit.floor(from_days(low)))
            high = to_days(unit.ceil(from_days(high)))
        divisions = _date_ticks(low, high, unit)

        logger.debug(
            f"date scale [{from_days(low)}, {from_days(high)}] unit={unit.value} "
            f"ticks={len(divisions)}"
        )
        return cls(ScaleType.DATE, low, high, divisions, extent.granularity, unit)


def _log_ticks(lo: float, hi: float) -> Tuple[float, ...]:
    first, last = math.ceil(lo - _EPS), math.floor(hi + _EPS)
    multipliers = (1, 2, 5) if hi - lo < 3 else (1,)
    ticks = []
    for k in range(first - 1, last + 1):
        for m in multipliers:
            value = m * 10.0 ** k
            if 10 ** lo * (1 - _EPS) <= value <= 10 ** hi * (1 + _EPS):
                ticks.append(float(value))
    return tuple(ticks)


def _date_ticks(low: float, high: float, unit: DateUnit) -> Tuple[float, ...]:
    ticks = []
    current = unit.ceil(from_days(low))
    while to_days(current) <= high + _EPS:
        ticks.append(to_days(current))
        try:
            current = unit.step(current)
        except (OverflowError, ValueError):
            break
    return tuple(ticks)
