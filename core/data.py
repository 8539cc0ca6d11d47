"""
AutoAxis - Data Conversion
Value parsers and whole-field conversions used by type inference.

Value level:
    as_numeric(value)  -> float | None
    as_date(value)     -> datetime | None

Field level (always return a NEW field over the same rows):
    to_list(field)
    to_numeric(field)
    to_date(field, method=None)
"""

from __future__ import annotations

import math
import numbers
import re
import warnings
from collections import Counter
from datetime import date, datetime
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd
from loguru import logger

from config.constants import LIST_SEPARATORS
from core.dates import DateUnit, to_datetime, to_days
from core.exceptions import ConversionError
from core.field import Field, FieldKind
from core.items_list import ItemsList

__all__ = [
    "as_numeric",
    "as_date",
    "to_list",
    "to_numeric",
    "to_date",
]


_THOUSANDS = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")
_DATE_SEPARATED = re.compile(r"\d\s*[-/.]\s*\d|\d{1,2}:\d{2}")
_MONTH_NAME = re.compile(
    r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\b",
    re.IGNORECASE,
)
_DIGIT = re.compile(r"\d")


# ---------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------
def _numeric_text(value: Any) -> Any:
    """Prepare one cell for ``pd.to_numeric`` (None where it cannot be a number)."""
    if value is None or isinstance(value, (bool, np.bool_, date)):
        return None
    if isinstance(value, str):
        text = value.strip()
        if _THOUSANDS.match(text):
            return text.replace(",", "")
        return text or None
    if isinstance(value, numbers.Real):
        return value
    return None


def _parse_numbers(values: Iterable[Any]) -> np.ndarray:
    """Float array of ``values``; NaN where a cell has no finite numeric reading."""
    prepared = pd.Series([_numeric_text(v) for v in values], dtype=object)
    parsed = pd.to_numeric(prepared, errors="coerce").to_numpy(dtype=float, na_value=np.nan)
    parsed[~np.isfinite(parsed)] = np.nan
    return parsed


def as_numeric(value: Any) -> Optional[float]:
    """
    Numeric reading of a single value.

    Dates are read as days since the epoch; booleans and non-finite numbers
    have no numeric reading.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, date):
        return to_days(value)
    if not isinstance(value, (str, numbers.Real)):
        return None
    v = _parse_numbers([value])[0]
    return None if np.isnan(v) else float(v)


def as_date(value: Any) -> Optional[datetime]:
    """
    Date reading of a single value.

    Numbers are never dates here; strings must look like dates (a digit plus
    a date separator or a month name) before pandas is asked to parse them.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, date):
        return to_datetime(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or as_numeric(text) is not None or not _DIGIT.search(text):
        return None
    if not (_DATE_SEPARATED.search(text) or _MONTH_NAME.search(text)):
        return None

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None

    if parsed is None or parsed is pd.NaT or pd.isna(parsed):
        return None
    return to_datetime(parsed)


# ---------------------------------------------------------------------
# Field conversions
# ---------------------------------------------------------------------
def _is_number_text(value: Any) -> bool:
    return isinstance(value, str) and as_numeric(value) is not None


def _pick_separator(field: Field) -> Optional[str]:
    counts: Counter = Counter()
    for v in field.values:
        # "1,234" is one number, not two items
        if isinstance(v, str) and not _is_number_text(v):
            for sep in LIST_SEPARATORS:
                counts[sep] += v.count(sep)
    if not counts:
        return None
    sep, n = counts.most_common(1)[0]
    return sep if n > 0 else None


def _split(value: Any, sep: Optional[str]) -> Optional[ItemsList]:
    if value is None:
        return None
    if isinstance(value, ItemsList):
        return value
    if not isinstance(value, str):
        return ItemsList((value,))
    if _is_number_text(value):
        return ItemsList((value.strip(),))
    parts = value.split(sep) if sep else [value]
    items = [p.strip() for p in parts if p.strip()]
    return ItemsList(items) if items else None


def to_list(field: Field) -> Field:
    """Split every cell on the field's dominant separator (``,`` ``;`` ``|``)."""
    sep = _pick_separator(field)
    values = [_split(v, sep) for v in field.values]
    logger.debug(f"to_list({field.name}): separator={sep!r}")
    return field.derive(values, FieldKind.LIST, {"list": True})


def to_numeric(field: Field) -> Field:
    """Numeric field; date objects and unparseable cells become null."""
    parsed = _parse_numbers(field.values)
    values = [None if np.isnan(v) else float(v) for v in parsed]
    return field.derive(values, FieldKind.NUMERIC)


def _year_to_date(value: Optional[float]) -> Optional[datetime]:
    if value is None or not math.isfinite(value):
        return None
    year = int(math.floor(value))
    if not 1 <= year <= 9999:
        return None
    return datetime(year, 1, 1)


def to_date(field: Field, method: Optional[str] = None) -> Field:
    """
    Date field.

    Args:
        field: Source field
        method: ``"year"`` reads numeric values as calendar years (January 1st
            of that year); ``None`` parses each cell with :func:`as_date`.
    """
    if method is None:
        values = [as_date(v) for v in field.values]
        return field.derive(values, FieldKind.DATE)

    if method == DateUnit.YEAR.value:
        if field.is_numeric():
            years = [float(v) for v in field.numeric_values()]
        else:
            years = [as_numeric(v) for v in field.values]
        values = [_year_to_date(v) for v in years]
        return field.derive(values, FieldKind.DATE, {"date_unit": DateUnit.YEAR})

    raise ConversionError(
        f"Unknown date conversion method '{method}'",
        details={"field": field.name}
    )
