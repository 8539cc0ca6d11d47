# config/constants.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Heuristic Constants                                           ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Type inference thresholds (sampling, majority rule)                   ║
║  ✓ Transform selection thresholds (skew, dynamic range)                  ║
║  ✓ Histogram binning factors (Freedman–Diaconis, Scott)                  ║
║  ✓ Year-likeness band                                                    ║
║  ✓ Transform / field kind names                                          ║
╚════════════════════════════════════════════════════════════════════════════╝

These values are empirically chosen and are shared by every caller. They are
intentionally not exposed through ``config.settings``.
"""

from __future__ import annotations

from typing import Final, Literal, Tuple

__all__ = [
    "TransformName",
    "TRANSFORM_LINEAR",
    "TRANSFORM_LOG",
    "TRANSFORM_ROOT",
    "TRANSFORMS",
    "FRACTION_TO_CONVERT",
    "SAMPLE_CAP",
    "LIST_MIN_VALID",
    "LIST_SMALL_SAMPLE",
    "LIST_SEPARATORS",
    "LOG_SKEW_THRESHOLD",
    "ROOT_SKEW_THRESHOLD",
    "LOG_SPREAD_RATIO",
    "MIN_BIN_COUNT",
    "MAX_AUTO_TICK_BINS",
    "FREEDMAN_DIACONIS_FACTOR",
    "SCOTT_FACTOR",
    "CUBE_ROOT_EXPONENT",
    "BIN_ROUNDING_OFFSET",
    "YEAR_LOW",
    "YEAR_HIGH",
    "INTEGER_TOLERANCE",
    "NICE_STEP_MULTIPLIERS",
]


# ═══════════════════════════════════════════════════════════════════════════
# Transforms
# ═══════════════════════════════════════════════════════════════════════════

TransformName = Literal["linear", "log", "root"]

TRANSFORM_LINEAR: Final[str] = "linear"
TRANSFORM_LOG: Final[str] = "log"
TRANSFORM_ROOT: Final[str] = "root"
TRANSFORMS: Final[Tuple[str, ...]] = (TRANSFORM_LINEAR, TRANSFORM_LOG, TRANSFORM_ROOT)


# ═══════════════════════════════════════════════════════════════════════════
# Type Inference
# ═══════════════════════════════════════════════════════════════════════════

FRACTION_TO_CONVERT: Final[float] = 0.5     # strict majority of sampled values
SAMPLE_CAP: Final[int] = 50                 # max non-null values sampled per pass

LIST_MIN_VALID: Final[int] = 3              # fewer valid rows → never a list
LIST_SMALL_SAMPLE: Final[int] = 20          # below this, any length variation is enough
LIST_SEPARATORS: Final[Tuple[str, ...]] = (",", ";", "|")

YEAR_LOW: Final[float] = 1600.0             # q1 below → not years
YEAR_HIGH: Final[float] = 2100.0            # q3 above → not years
INTEGER_TOLERANCE: Final[float] = 1e-6


# ═══════════════════════════════════════════════════════════════════════════
# Transform Selection
# ═══════════════════════════════════════════════════════════════════════════

LOG_SKEW_THRESHOLD: Final[float] = 2.0
ROOT_SKEW_THRESHOLD: Final[float] = 1.0
LOG_SPREAD_RATIO: Final[float] = 75.0       # max must exceed 75 × min for log


# ═══════════════════════════════════════════════════════════════════════════
# Binning & Ticks
# ═══════════════════════════════════════════════════════════════════════════

MIN_BIN_COUNT: Final[int] = 2
MAX_AUTO_TICK_BINS: Final[int] = 20
FREEDMAN_DIACONIS_FACTOR: Final[float] = 2.0
SCOTT_FACTOR: Final[float] = 3.5
CUBE_ROOT_EXPONENT: Final[float] = 0.33333
BIN_ROUNDING_OFFSET: Final[float] = 0.499

NICE_STEP_MULTIPLIERS: Final[Tuple[float, ...]] = (1.0, 2.0, 5.0, 10.0)
