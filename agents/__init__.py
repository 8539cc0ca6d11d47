# agents/__init__.py
"""
AutoAxis - Agents Package

Lazy exports (PEP 562): importing the package does not load pandas or the
auto algorithms until an agent is accessed.

Usage:
```python
    from agents import AutoProfiler

    result = AutoProfiler().run(data=df)
```
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class _LazySpec:
    """Specification for lazy-loaded symbol."""
    module: str
    symbol: str


_LAZY_EXPORTS: Dict[str, _LazySpec] = {
    "AutoProfiler": _LazySpec("agents.auto_profiler", "AutoProfiler"),
    "ProfileOptions": _LazySpec("agents.auto_profiler", "ProfileOptions"),
}

__all__ = tuple(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    spec = _LAZY_EXPORTS.get(name)
    if spec is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
    obj = getattr(importlib.import_module(spec.module), spec.symbol)
    globals()[name] = obj
    return obj


def __dir__() -> List[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_EXPORTS.keys())))
