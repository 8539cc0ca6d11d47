"""
AutoAxis - Field Statistics
Lazily computed summary properties for fields.

Every calculator takes a field and returns the property value (``None`` when
the statistic is undefined). ``Field.property`` looks calculators up by name
and caches the result on the field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from core.dates import DateUnit, from_days
from core.items_list import ItemsList

if TYPE_CHECKING:
    from core.field import Field

__all__ = ["CALCULATORS", "compute_property"]


def _finite(field: "Field") -> np.ndarray:
    values = field.numeric_values()
    return values[np.isfinite(values)]


def _or_none(value: Any) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return value if np.isfinite(value) else None


# ---------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------
def _valid(field: "Field") -> int:
    return sum(1 for v in field.values if v is not None)


def _row_count(field: "Field") -> int:
    return len(field.values)


# ---------------------------------------------------------------------
# Numeric summaries
# ---------------------------------------------------------------------
def _min(field: "Field") -> Optional[float]:
    x = _finite(field)
    return float(x.min()) if x.size else None


def _max(field: "Field") -> Optional[float]:
    x = _finite(field)
    return float(x.max()) if x.size else None


def _mean(field: "Field") -> Optional[float]:
    x = _finite(field)
    return float(x.mean()) if x.size else None


def _stddev(field: "Field") -> Optional[float]:
    x = _finite(field)
    return float(np.std(x, ddof=1)) if x.size >= 2 else None


def _quantile(q: float) -> Callable[["Field"], Optional[float]]:
    def calc(field: "Field") -> Optional[float]:
        x = _finite(field)
        return float(np.percentile(x, q)) if x.size else None
    return calc


def _skew(field: "Field") -> Optional[float]:
    # bias-corrected sample skewness; NaN (→ None) below 3 values or for constants
    x = _finite(field)
    if x.size < 3:
        return None
    return _or_none(pd.Series(x).skew())


def _granularity(field: "Field") -> Optional[float]:
    """Smallest positive gap between distinct values."""
    x = np.unique(_finite(field))
    if x.size < 2:
        return None
    diffs = np.diff(x)
    positive = diffs[diffs > 0]
    return float(positive.min()) if positive.size else None


# ---------------------------------------------------------------------
# Categorical summaries
# ---------------------------------------------------------------------
def _categories(field: "Field") -> Tuple[Any, ...]:
    seen: Dict[Any, None] = {}
    for v in field.values:
        if v is not None and v not in seen:
            seen[v] = None
    return tuple(seen)


def _list_categories(field: "Field") -> Tuple[Any, ...]:
    items = set()
    for v in field.values:
        if isinstance(v, ItemsList):
            items.update(v)
    return tuple(sorted(items, key=lambda item: (str(type(item)), str(item))))


# ---------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------
_INFERABLE_UNITS = (
    DateUnit.YEAR,
    DateUnit.MONTH,
    DateUnit.DAY,
    DateUnit.HOUR,
    DateUnit.MINUTE,
    DateUnit.SECOND,
)


def _date_unit(field: "Field") -> Optional[DateUnit]:
    """Coarsest unit every date value is aligned to."""
    if not field.is_date():
        return None
    x = _finite(field)
    if not x.size:
        return None
    moments = [from_days(d) for d in np.unique(x)]
    for unit in _INFERABLE_UNITS:
        if all(unit.is_aligned(m) for m in moments):
            return unit
    return DateUnit.SECOND


CALCULATORS: Dict[str, Callable[["Field"], Any]] = {
    "valid": _valid,
    "row_count": _row_count,
    "min": _min,
    "max": _max,
    "mean": _mean,
    "stddev": _stddev,
    "q1": _quantile(25),
    "median": _quantile(50),
    "q3": _quantile(75),
    "skew": _skew,
    "granularity": _granularity,
    "categories": _categories,
    "list_categories": _list_categories,
    "date_unit": _date_unit,
}


def compute_property(field: "Field", name: str) -> Any:
    """Compute a known property; unknown names have no value."""
    calc = CALCULATORS.get(name)
    return calc(field) if calc is not None else None
