# scales/__init__.py
"""
AutoAxis - Scales Package

Extents and the numeric / log / date scale constructors. Exports are loaded
lazily (PEP 562) so that ``scales.extent`` and the ``auto`` package can import
each other's modules without cycles.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Tuple

_LAZY_EXPORTS: Dict[str, Tuple[str, str]] = {
    "NumericExtentDetail": ("scales.extent", "NumericExtentDetail"),
    "NumericScale": ("scales.numeric_scale", "NumericScale"),
    "ScaleType": ("scales.numeric_scale", "ScaleType"),
    "nice_step": ("scales.numeric_scale", "nice_step"),
}

__all__ = tuple(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    if name in _LAZY_EXPORTS:
        module_name, symbol_name = _LAZY_EXPORTS[name]
        obj = getattr(import_module(module_name), symbol_name)
        globals()[name] = obj
        return obj
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> List[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_EXPORTS.keys())))
