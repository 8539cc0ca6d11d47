# core/__init__.py
"""
AutoAxis core: fields, statistics, conversion and the agent framework.

```
    core/
    ├── field.py             # Field + pandas bridges
    ├── stats.py             # lazily computed field properties
    ├── data.py              # as_numeric / as_date / to_list / to_numeric / to_date
    ├── dates.py             # DateUnit, day-number conversion
    ├── items_list.py        # ItemsList
    ├── base_agent.py        # BaseAgent / AgentResult
    └── exceptions.py        # AutoAxisException hierarchy
```

Exports resolve on first access, so ``import core`` stays cheap and
``scales`` / ``auto`` can import ``core.field`` without pulling in pandas
bridges they do not need.

```python
    from core import Field, to_numeric

    field = to_numeric(Field("price", ["1", "2,500", "n/a"]))
```
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List

_EXPORTS_BY_MODULE: Dict[str, tuple] = {
    "core.base_agent": ("BaseAgent", "AgentResult", "AgentStatus"),
    "core.field": ("Field", "FieldKind", "field_from_series", "fields_from_dataframe"),
    "core.items_list": ("ItemsList",),
    "core.dates": ("DateUnit",),
    "core.data": ("as_numeric", "as_date", "to_list", "to_numeric", "to_date"),
}

_LAZY_EXPORTS: Dict[str, str] = {
    symbol: module for module, symbols in _EXPORTS_BY_MODULE.items() for symbol in symbols
}

__all__ = tuple(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    module = _LAZY_EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(import_module(module), name)
    globals()[name] = value
    return value


def __dir__() -> List[str]:
    return sorted({*globals(), *_LAZY_EXPORTS})
