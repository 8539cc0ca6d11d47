# core/base_agent.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Base Agent                                                    ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Abstract Base Agent Class                                             ║
║  ✓ Lifecycle Hooks (validate → before → execute → after)                 ║
║  ✓ AgentResult with monotonic status (success → partial → failed)        ║
║  ✓ JSON-safe payloads (numpy / pandas / dates / scale dataclasses)       ║
╚════════════════════════════════════════════════════════════════════════════╝

``run()`` never raises: any failure in the lifecycle is logged and returned
as a ``failed`` result carrying the error message.

Usage:
```python
    from core.base_agent import AgentResult, BaseAgent

    class ColumnCounter(BaseAgent):
        def __init__(self):
            super().__init__(name="column_counter")

        def execute(self, data=None, **kwargs) -> AgentResult:
            out = AgentResult(agent_name=self.name)
            out.add_data(n_columns=data.shape[1])
            return out

    ColumnCounter().run(data=df).data["n_columns"]
```
"""

from __future__ import annotations

import dataclasses
import json
import time
from abc import ABC, abstractmethod
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple
from uuid import uuid4

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field

from config.logging_config import get_logger

__all__ = [
    "BaseAgent",
    "AgentResult",
    "AgentStatus",
    "AgentError",
]


# ═══════════════════════════════════════════════════════════════════════════
# Types & Exceptions
# ═══════════════════════════════════════════════════════════════════════════

AgentStatus = Literal["success", "partial", "failed"]

# a result only ever moves right in this order
_STATUS_RANK: Dict[str, int] = {"success": 0, "partial": 1, "failed": 2}


class AgentError(RuntimeError):
    """Raised when an agent breaks its contract with ``run()``."""


# ═══════════════════════════════════════════════════════════════════════════
# JSON encoding
# ═══════════════════════════════════════════════════════════════════════════

_ENCODERS: Tuple[Tuple[Tuple[type, ...], Callable[[Any], Any]], ...] = (
    ((np.bool_,), bool),
    ((np.integer,), int),
    ((np.floating,), float),
    ((np.ndarray, pd.Series, pd.Index), lambda v: v.tolist()),
    ((pd.DataFrame,), lambda v: json.loads(v.to_json(orient="records", date_format="iso"))),
    ((pd.Timestamp, datetime, date), lambda v: v.isoformat()),
    ((Enum,), lambda v: v.value),
    ((set, frozenset), lambda v: sorted(v, key=str)),
)


def _encode(value: Any) -> Any:
    """``json.dumps`` fallback for values the stdlib encoder rejects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    for types, encoder in _ENCODERS:
        if isinstance(value, types):
            return encoder(value)
    return str(value)


# ═══════════════════════════════════════════════════════════════════════════
# Agent Result
# ═══════════════════════════════════════════════════════════════════════════

class AgentResult(BaseModel):
    """
    📊 **Agent Run Result**

    ``data`` holds the agent's payload, ``metadata`` describes how it was
    produced. Errors fail the result; warnings only downgrade a success to
    partial.
    """

    agent_name: str
    status: AgentStatus = "success"
    run_id: str = Field(default_factory=lambda: uuid4().hex[:12])

    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    execution_time: float = 0.0

    data: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    # ───────────────────────────────────────────────────────────────────
    # Status
    # ───────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self.status == "success"

    def is_partial(self) -> bool:
        return self.status == "partial"

    def is_failed(self) -> bool:
        return self.status == "failed"

    def _degrade(self, status: AgentStatus) -> None:
        if _STATUS_RANK[status] > _STATUS_RANK[self.status]:
            self.status = status

    # ───────────────────────────────────────────────────────────────────
    # Mutations
    # ───────────────────────────────────────────────────────────────────

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self._degrade("failed")

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)
        self._degrade("partial")

    def add_data(self, **items: Any) -> None:
        self.data.update(items)

    def add_metadata(self, **items: Any) -> None:
        self.metadata.update(items)

    def stamp(self, started_at: datetime, perf_start: float) -> "AgentResult":
        """Record wall-clock bounds and the elapsed perf-counter time."""
        self.started_at = started_at
        self.finished_at = datetime.now()
        self.execution_time = time.perf_counter() - perf_start
        return self

    # ───────────────────────────────────────────────────────────────────
    # Serialization
    # ───────────────────────────────────────────────────────────────────

    def to_json(self, indent: Optional[int] = None) -> str:
        """Dump the result; scales, arrays and dates are converted on the way."""
        return json.dumps(self.model_dump(), default=_encode, ensure_ascii=False, indent=indent)


# ═══════════════════════════════════════════════════════════════════════════
# Base Agent
# ═══════════════════════════════════════════════════════════════════════════

class BaseAgent(ABC):
    """
    🤖 **Base Agent**

    Subclasses implement ``execute`` and may override the hooks:
```
        run() → validate_input() → before_execute() → execute() → after_execute()
```
    """

    def __init__(self, name: str, description: str = "", version: str = "1.0"):
        self.name = name
        self.description = description
        self.version = version

        self.logger = get_logger(f"agents.{name}", agent=name, component="agent")
        self._last: Optional[AgentResult] = None

    @abstractmethod
    def execute(self, **kwargs) -> AgentResult:
        """Do the work; must return an AgentResult."""

    # ───────────────────────────────────────────────────────────────────
    # Hooks
    # ───────────────────────────────────────────────────────────────────

    def validate_input(self, **kwargs) -> bool:
        """Raise ``ValueError``/``TypeError`` to reject the call."""
        return True

    def before_execute(self, **kwargs) -> None:
        self.logger.debug(f"[{self.name}] run started ({', '.join(sorted(kwargs)) or 'no args'})")

    def after_execute(self, result: AgentResult) -> None:
        self.logger.info(
            f"[{self.name}] {result.status} in {result.execution_time:.3f}s "
            f"({len(result.warnings)} warning(s))"
        )

    # ───────────────────────────────────────────────────────────────────
    # Run
    # ───────────────────────────────────────────────────────────────────

    def run(self, **kwargs) -> AgentResult:
        """
        🚀 **Run the agent**

        Returns:
            AgentResult; failures come back with status ``failed``
        """
        perf_start = time.perf_counter()
        started_at = datetime.now()

        try:
            result = self._lifecycle(kwargs).stamp(started_at, perf_start)
            self.after_execute(result)
        except Exception as e:
            self.logger.opt(exception=e).error(f"[{self.name}] run failed: {e}")
            result = AgentResult(agent_name=self.name)
            result.add_error(f"{type(e).__name__}: {e}")
            result.stamp(started_at, perf_start)

        self._last = result
        return result

    def _lifecycle(self, kwargs: Dict[str, Any]) -> AgentResult:
        self.validate_input(**kwargs)
        self.before_execute(**kwargs)

        result = self.execute(**kwargs)
        if not isinstance(result, AgentResult):
            raise AgentError(
                f"{self.name}.execute() returned {type(result).__name__}, not AgentResult"
            )
        return result

    def get_last_result(self) -> Optional[AgentResult]:
        return self._last

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} v{self.version}>"
