# core/field.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Field                                                         ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Immutable column of values (raw / numeric / date / list / synthetic)  ║
║  ✓ Lazily computed, cached summary properties                            ║
║  ✓ Numeric view (dates in days since the epoch)                          ║
║  ✓ pandas bridges (Series / DataFrame → Field)                           ║
╚════════════════════════════════════════════════════════════════════════════╝

A field never changes its rows. Type conversions (see ``core.data``) build a
new field over the same rows with :meth:`Field.derive`. The property cache is
the only mutable state; the auto algorithms write back a single property,
``transform``.

Usage:
```python
    from core.field import Field, FieldKind

    f = Field("price", [1.0, 2.5, None, 4.0], kind=FieldKind.NUMERIC)
    f.valid()                # 3
    f.num_property("q3")     # 3.25
    f.set("transform", "root")
```
"""

from __future__ import annotations

import math
import numbers
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from core.dates import to_days
from core.exceptions import FieldPropertyError
from core.stats import compute_property

__all__ = [
    "FieldKind",
    "Field",
    "is_missing",
    "field_from_series",
    "fields_from_dataframe",
]


# ═══════════════════════════════════════════════════════════════════════════
# Kinds & Missing Values
# ═══════════════════════════════════════════════════════════════════════════

class FieldKind(str, Enum):
    """Semantic kind of a field."""
    RAW = "raw"
    NUMERIC = "numeric"
    DATE = "date"
    LIST = "list"
    SYNTHETIC = "synthetic"


def is_missing(value: Any) -> bool:
    """None, NaN, NaT and pd.NA are all treated as null cells."""
    if value is None or value is pd.NaT or value is pd.NA:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, np.datetime64):
        return bool(np.isnat(value))
    return False


# ═══════════════════════════════════════════════════════════════════════════
# Field
# ═══════════════════════════════════════════════════════════════════════════

class Field:
    """
    🧱 **Data Column with Cached Statistics**

    Args:
        name: Column name
        values: Row values (nulls normalised to ``None``)
        kind: Semantic kind
        label: Display label (defaults to the name)
        properties: Pre-set properties (e.g. ``{"list": True}``)
    """

    def __init__(
        self,
        name: str,
        values: Iterable[Any],
        kind: FieldKind | str = FieldKind.RAW,
        *,
        label: Optional[str] = None,
        properties: Optional[Dict[str, Any]] = None
    ):
        self.name = name
        self.label = label or name
        self.kind = FieldKind(kind)
        self._values = tuple(None if is_missing(v) else v for v in values)
        self._properties: Dict[str, Any] = dict(properties or {})
        self._numeric: Optional[np.ndarray] = None

    # ───────────────────────────────────────────────────────────────────
    # Construction
    # ───────────────────────────────────────────────────────────────────

    @classmethod
    def synthetic(cls, name: str, row_count: int) -> "Field":
        """Row-index field (e.g. ``#row``)."""
        return cls(name, range(row_count), FieldKind.SYNTHETIC)

    def derive(
        self,
        values: Iterable[Any],
        kind: FieldKind | str,
        properties: Optional[Dict[str, Any]] = None
    ) -> "Field":
        """New field over the same rows, keeping name and label."""
        return Field(self.name, values, kind, label=self.label, properties=properties)

    # ───────────────────────────────────────────────────────────────────
    # Values
    # ───────────────────────────────────────────────────────────────────

    @property
    def values(self) -> tuple:
        return self._values

    def value(self, row: int) -> Any:
        return self._values[row]

    def row_count(self) -> int:
        return len(self._values)

    def valid(self) -> int:
        return int(self.property("valid"))

    def numeric_values(self) -> np.ndarray:
        """Float view of the rows (NaN where there is no numeric value)."""
        if self._numeric is None:
            self._numeric = np.array(
                [self._as_number(v) for v in self._values], dtype=float
            )
        return self._numeric

    def _as_number(self, v: Any) -> float:
        if v is None:
            return np.nan
        if self.kind is FieldKind.DATE and isinstance(v, date):
            return to_days(v)
        if self.kind in (FieldKind.NUMERIC, FieldKind.SYNTHETIC) \
                and isinstance(v, numbers.Real) and not isinstance(v, bool):
            return float(v)
        return np.nan

    # ───────────────────────────────────────────────────────────────────
    # Properties
    # ───────────────────────────────────────────────────────────────────

    def property(self, name: str) -> Any:
        if name not in self._properties:
            self._properties[name] = compute_property(self, name)
        return self._properties[name]

    def has_cached(self, name: str) -> bool:
        """Whether ``name`` has been set or computed already."""
        return name in self._properties

    def set(self, name: str, value: Any) -> None:
        self._properties[name] = value

    def num_property(self, name: str) -> Optional[float]:
        v = self.property(name)
        if v is None:
            return None
        if isinstance(v, numbers.Real) and not isinstance(v, bool):
            return float(v)
        raise FieldPropertyError(
            f"Property '{name}' of field '{self.name}' is not numeric",
            details={"value": repr(v)}
        )

    def str_property(self, name: str) -> Optional[str]:
        v = self.property(name)
        if v is None:
            return None
        if isinstance(v, Enum):
            return str(v.value)
        if isinstance(v, str):
            return v
        raise FieldPropertyError(
            f"Property '{name}' of field '{self.name}' is not a string",
            details={"value": repr(v)}
        )

    def is_property(self, name: str) -> bool:
        v = self.property(name)
        return isinstance(v, (bool, np.bool_)) and bool(v)

    def min(self) -> Optional[float]:
        return self.num_property("min")

    def max(self) -> Optional[float]:
        return self.num_property("max")

    # ───────────────────────────────────────────────────────────────────
    # Predicates
    # ───────────────────────────────────────────────────────────────────

    def is_synthetic(self) -> bool:
        return self.kind is FieldKind.SYNTHETIC

    def is_date(self) -> bool:
        return self.kind is FieldKind.DATE

    def is_numeric(self) -> bool:
        return self.kind in (FieldKind.NUMERIC, FieldKind.DATE, FieldKind.SYNTHETIC)

    # ───────────────────────────────────────────────────────────────────
    # Dunder
    # ───────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, kind={self.kind.value}, rows={len(self._values)})"


# ═══════════════════════════════════════════════════════════════════════════
# pandas Bridges
# ═══════════════════════════════════════════════════════════════════════════

def field_from_series(series: pd.Series, name: Optional[str] = None) -> Field:
    """
    Build a field from a pandas Series.

    Numeric dtypes (not bool) → numeric, datetime dtypes → date, anything else
    stays raw and is left to type inference.
    """
    name = str(name if name is not None else series.name)

    if ptypes.is_bool_dtype(series):
        return Field(name, series.tolist(), FieldKind.RAW)

    if ptypes.is_numeric_dtype(series):
        return Field(name, series.astype(float).tolist(), FieldKind.NUMERIC)

    if ptypes.is_datetime64_any_dtype(series):
        values = [None if is_missing(v) else v.to_pydatetime() for v in series]
        return Field(name, values, FieldKind.DATE)

    return Field(name, series.astype(object).tolist(), FieldKind.RAW)


def fields_from_dataframe(df: pd.DataFrame) -> List[Field]:
    """One field per DataFrame column, in column order."""
    return [field_from_series(df[col], name=str(col)) for col in df.columns]
