# === MODULE OVERVIEW ===
"""
AutoAxis - Auto Profiler
Runs type inference, transform selection, bin estimation and scale building
over every column of a DataFrame.

Contract (AgentResult.data):
{
    "columns": {
        <name>: {
            "kind": "raw" | "numeric" | "date" | "list",
            "field": Field,                    # converted field
            "transform": str | None,           # numeric / date only
            "optimal_bin_count": int | None,   # numeric / date only
            "extent": NumericExtentDetail | None,
            "scale": NumericScale | None,
        }
    },
    "summary": {"n_columns": int, "kinds": Dict[str, int]}
}

Column failures do not stop the run: they become result warnings and the
column is reported with its raw field only.
"""

# === IMPORTS ===
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
from loguru import logger

from auto.bin_estimator import optimal_bin_count
from auto.scale_builder import make_numeric_scale
from auto.transform_selector import define_transform
from auto.type_inferencer import convert
from config.logging_config import LogContext, log_execution_time
from config.settings import get_settings
from core.base_agent import AgentResult, BaseAgent
from core.exceptions import AutoAxisException, ProfilingError, exception_context
from core.field import Field, field_from_series
from scales.extent import NumericExtentDetail

__all__ = ["ProfileOptions", "AutoProfiler"]


# === OPTIONS ===
@dataclass(frozen=True)
class ProfileOptions:
    """Scale layout knobs for one profiling run (defaults come from settings)."""
    nice: bool
    pad_fraction: Sequence[float]
    include_zero_tolerance: float
    desired_tick_count: int
    for_binning: bool
    seed: Optional[int]

    @classmethod
    def from_settings(cls, **overrides: Any) -> "ProfileOptions":
        s = get_settings()
        values = {
            "nice": s.SCALE_NICE,
            "pad_fraction": tuple(s.scale_pad_fraction),
            "include_zero_tolerance": s.SCALE_ZERO_TOLERANCE,
            "desired_tick_count": s.SCALE_DESIRED_TICKS,
            "for_binning": s.SCALE_FOR_BINNING,
            "seed": s.AUTO_RANDOM_SEED,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


# === MAIN AGENT ===
class AutoProfiler(BaseAgent):
    """
    Infers type, transform, bin count and axis scale for each column.
    """

    def __init__(self) -> None:
        super().__init__(
            name="AutoProfiler",
            description="Infers field types, transforms and axis scales"
        )

    # === INPUT VALIDATION ===
    def validate_input(self, **kwargs) -> bool:
        if "data" not in kwargs:
            raise ValueError("'data' parameter is required")
        df = kwargs["data"]
        if not isinstance(df, pd.DataFrame):
            raise TypeError("'data' must be a pandas DataFrame")
        columns = kwargs.get("columns")
        if columns is not None:
            missing = [c for c in columns if c not in df.columns]
            if missing:
                raise ValueError(f"Unknown columns: {missing}")
        return True

    # === EXECUTION ===
    @log_execution_time
    def execute(
        self,
        data: pd.DataFrame,
        columns: Optional[List[str]] = None,
        nice: Optional[bool] = None,
        pad_fraction: Optional[Sequence[float]] = None,
        include_zero_tolerance: Optional[float] = None,
        desired_tick_count: Optional[int] = None,
        for_binning: Optional[bool] = None,
        seed: Optional[int] = None,
        **kwargs: Any
    ) -> AgentResult:
        """
        Profile the DataFrame.

        Args:
            data: Input frame
            columns: Subset of columns (default: all, in frame order)
            nice / pad_fraction / include_zero_tolerance / desired_tick_count /
            for_binning: Scale layout overrides
            seed: Sampling seed for type inference
        """
        result = AgentResult(agent_name=self.name)
        options = ProfileOptions.from_settings(
            nice=nice,
            pad_fraction=pad_fraction,
            include_zero_tolerance=include_zero_tolerance,
            desired_tick_count=desired_tick_count,
            for_binning=for_binning,
            seed=seed,
        )
        rng = np.random.default_rng(options.seed)

        selected = list(columns) if columns is not None else list(data.columns)
        profiles: Dict[str, Dict[str, Any]] = {}

        for column in selected:
            name = str(column)
            raw = field_from_series(data[column], name=name)
            try:
                with LogContext(column=name), exception_context(
                    to=ProfilingError,
                    message=f"Profiling column '{name}' failed",
                    context={"column": name},
                ):
                    profiles[name] = self._profile_field(raw, options, rng)
            except AutoAxisException as e:
                self.logger.warning(f"[{self.name}] column '{name}': {e}")
                result.add_warning(f"Column '{name}': {e}")
                profiles[name] = self._empty_profile(raw)

        kinds = Counter(p["kind"] for p in profiles.values())
        result.add_data(
            columns=profiles,
            summary={"n_columns": len(profiles), "kinds": dict(kinds)},
        )
        result.add_metadata(
            seed=options.seed,
            nice=options.nice,
            pad_fraction=list(options.pad_fraction),
        )
        return result

    # === PER-FIELD ===
    def _profile_field(
        self,
        raw: Field,
        options: ProfileOptions,
        rng: np.random.Generator
    ) -> Dict[str, Any]:
        field = convert(raw, rng=rng)
        profile = self._empty_profile(field)

        if not field.is_numeric():
            return profile
        if field.min() is None:
            raise ProfilingError(
                "Column has no numeric values",
                details={"field": field.name}
            )

        transform = define_transform(field)
        extent = NumericExtentDetail.make_for_field(field)
        scale = make_numeric_scale(
            extent,
            options.nice,
            list(options.pad_fraction),
            options.include_zero_tolerance,
            options.desired_tick_count,
            options.for_binning,
        )
        logger.debug(f"profiled {field.name}: {field.kind.value}/{transform} -> {scale.type}")

        profile.update(
            transform=transform,
            optimal_bin_count=optimal_bin_count(field),
            extent=extent,
            scale=scale,
        )
        return profile

    @staticmethod
    def _empty_profile(field: Field) -> Dict[str, Any]:
        return {
            "kind": field.kind.value,
            "field": field,
            "transform": None,
            "optimal_bin_count": None,
            "extent": None,
            "scale": None,
        }
