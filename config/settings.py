# config/settings.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Settings                                                      ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ pydantic-settings with .env support                                   ║
║  ✓ Axis defaults for the Auto Profiler                                   ║
║  ✓ Logging sinks and levels                                              ║
╚════════════════════════════════════════════════════════════════════════════╝

Heuristic thresholds (sampling cap, skew limits, year band, ...) are not
settings; they live in ``config.constants``. Settings only hold the knobs a
caller may reasonably want to change per deployment.

Usage:
```python
    from config.settings import get_settings

    s = get_settings()
    s.scale_pad_fraction        # [0.0, 0.0], a new list each time
```

Environment Variables:
    • SCALE_NICE, SCALE_PAD_LOW, SCALE_PAD_HIGH, SCALE_ZERO_TOLERANCE
    • SCALE_DESIRED_TICKS, SCALE_FOR_BINNING, AUTO_RANDOM_SEED
    • LOG_LEVEL, LOGS_PATH, TEST_MODE
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings", "get_settings"]

load_dotenv()

ROOT_DIR = Path(__file__).resolve().parent.parent

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_MAX_DESIRED_TICKS = 100


class Settings(BaseSettings):
    """Process-wide configuration, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        validate_assignment=True,
    )

    TEST_MODE: bool = False

    # ───────────────────────────────────────────────────────────────────
    # Axis defaults
    # ───────────────────────────────────────────────────────────────────

    SCALE_NICE: bool = True
    SCALE_PAD_LOW: float = Field(default=0.0, ge=0.0, le=1.0)
    SCALE_PAD_HIGH: float = Field(default=0.0, ge=0.0, le=1.0)
    SCALE_ZERO_TOLERANCE: float = Field(default=0.1, ge=0.0, le=1.0)
    SCALE_DESIRED_TICKS: int = 0        # < 1 → derived from the optimal bin count
    SCALE_FOR_BINNING: bool = False

    # None → non-deterministic sampling order during type inference
    AUTO_RANDOM_SEED: Optional[int] = None

    # ───────────────────────────────────────────────────────────────────
    # Logging
    # ───────────────────────────────────────────────────────────────────

    LOG_LEVEL: str = "INFO"
    LOG_JSON_ENABLED: bool = False
    LOG_CONSOLE_COMPACT: bool = False
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "30 days"
    LOGS_PATH: Path = ROOT_DIR / "logs"

    @computed_field
    @property
    def scale_pad_fraction(self) -> List[float]:
        """Fresh ``[low, high]`` pad list (scale building may consume it)."""
        return [self.SCALE_PAD_LOW, self.SCALE_PAD_HIGH]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalise_log_level(cls, v: str) -> str:
        level = (v or "").upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, not {v!r}")
        return level

    @field_validator("LOGS_PATH", mode="before")
    @classmethod
    def _expand_logs_path(cls, v: Path | str) -> Path:
        return Path(v).expanduser().resolve()

    @model_validator(mode="after")
    def _check_axis_defaults(self) -> "Settings":
        if self.SCALE_DESIRED_TICKS > _MAX_DESIRED_TICKS:
            raise ValueError(
                f"SCALE_DESIRED_TICKS is capped at {_MAX_DESIRED_TICKS} (got {self.SCALE_DESIRED_TICKS})"
            )
        # both pads together must leave some of the axis for the data
        if self.SCALE_PAD_LOW + self.SCALE_PAD_HIGH >= 1.0:
            raise ValueError(
                f"SCALE_PAD_LOW + SCALE_PAD_HIGH must stay below 1.0 "
                f"(got {self.SCALE_PAD_LOW} + {self.SCALE_PAD_HIGH})"
            )
        return self


settings = Settings()


def get_settings() -> Settings:
    """The process-wide ``Settings`` instance."""
    return settings
