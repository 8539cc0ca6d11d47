# config/logging_config.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Logging Configuration                                         ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ loguru console sink, rotated file sinks outside TEST_MODE             ║
║  ✓ Stdlib logging and warnings routed into loguru                        ║
║  ✓ Bound loggers and per-column context                                  ║
║  ✓ Timing decorator for profiling runs                                   ║
╚════════════════════════════════════════════════════════════════════════════╝

Sinks:
```
    stderr              always
    autoaxis.log        level from settings, rotated
    autoaxis-errors.log ERROR and above
    autoaxis.jsonl      serialized records, when LOG_JSON_ENABLED
```
File sinks are never opened in TEST_MODE.

Usage:
```python
    from config.logging_config import LogContext, setup_logging

    setup_logging(log_level="DEBUG")
    with LogContext(column="price"):
        convert(field)          # records carry extra["column"]
```
"""

from __future__ import annotations

import logging
import sys
import time
import warnings
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from loguru import logger

from config.settings import settings

__all__ = [
    "setup_logging",
    "get_logger",
    "log_execution_time",
    "LogContext",
    "InterceptHandler",
]


# ═══════════════════════════════════════════════════════════════════════════
# Formats
# ═══════════════════════════════════════════════════════════════════════════

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> "
    "<level>{message}</level>"
)
COMPACT_FORMAT = "{time:HH:mm:ss} {level: <7} {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {extra} | {message}"

_sink_ids: List[int] = []
_configured = False


# ═══════════════════════════════════════════════════════════════════════════
# Stdlib bridge
# ═══════════════════════════════════════════════════════════════════════════

class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (pandas, numpy, warnings) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: Union[str, int]
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # custom stdlib level

        # walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


# ═══════════════════════════════════════════════════════════════════════════
# Setup
# ═══════════════════════════════════════════════════════════════════════════

def _file_sinks(logs_dir: Path, level: str, enable_json: bool) -> List[Dict[str, Any]]:
    rotated = {
        "rotation": settings.LOG_ROTATION,
        "retention": settings.LOG_RETENTION,
        "encoding": "utf-8",
        "enqueue": True,
    }
    sinks = [
        {"sink": logs_dir / "autoaxis.log", "level": level, "format": FILE_FORMAT, **rotated},
        {"sink": logs_dir / "autoaxis-errors.log", "level": "ERROR", "format": FILE_FORMAT, **rotated},
    ]
    if enable_json:
        sinks.append({"sink": logs_dir / "autoaxis.jsonl", "level": level, "serialize": True, **rotated})
    return sinks


def setup_logging(
    log_level: Optional[str] = None,
    *,
    enable_json: Optional[bool] = None,
    console_compact: Optional[bool] = None,
    logs_path: Optional[Union[str, Path]] = None,
    reset_existing: bool = False,
) -> None:
    """
    🔧 **Configure loguru sinks**

    Calling again is a no-op unless ``reset_existing`` is set. Unset
    arguments fall back to ``settings``.
    """
    global _configured

    if _configured and not reset_existing:
        return

    level = (log_level or settings.LOG_LEVEL).upper()
    compact = settings.LOG_CONSOLE_COMPACT if console_compact is None else console_compact
    enable_json = settings.LOG_JSON_ENABLED if enable_json is None else enable_json

    logger.remove()
    _sink_ids.clear()
    _sink_ids.append(
        logger.add(
            sys.stderr,
            level=level,
            format=COMPACT_FORMAT if compact else CONSOLE_FORMAT,
            colorize=True,
            backtrace=level == "DEBUG",
            diagnose=False,
        )
    )

    if not settings.TEST_MODE:
        logs_dir = Path(logs_path or settings.LOGS_PATH).resolve()
        logs_dir.mkdir(parents=True, exist_ok=True)
        for spec in _file_sinks(logs_dir, level, enable_json):
            _sink_ids.append(logger.add(**spec))

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.captureWarnings(True)
    warnings.simplefilter("default")

    logger.debug(f"logging ready: level={level} sinks={len(_sink_ids)} test_mode={settings.TEST_MODE}")
    _configured = True


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_logger(name: Optional[str] = None, **binds: Any):
    """loguru logger bound to ``name`` plus any extra fields."""
    if name:
        binds = {"logger_name": name, **binds}
    return logger.bind(**binds) if binds else logger


class LogContext:
    """
    Bind fields to every record emitted inside the block.

    Uses ``logger.contextualize`` so nested calls (type inference, scale
    construction) pick up the context without being passed a logger.
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = logger.contextualize(**self.fields)
        self._token.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self._token.__exit__(exc_type, exc_val, exc_tb)
        return False


def log_execution_time(func: Callable) -> Callable:
    """
    ⏱️ **Timing decorator**

    Logs the wrapped call's duration at DEBUG; failures are logged with
    their duration and re-raised.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        t0 = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__qualname__} failed after {time.perf_counter() - t0:.3f}s: {e}")
            raise
        logger.debug(f"{func.__qualname__} took {time.perf_counter() - t0:.3f}s")
        return result

    return wrapper


if not settings.TEST_MODE:
    setup_logging()
