# auto/__init__.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Auto Package                                                  ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Type inference        (convert, good_lists, is_yearly)                ║
║  ✓ Transform selection   (define_transform, transform_for_skew)          ║
║  ✓ Bin estimation        (optimal_bin_count)                             ║
║  ✓ Scale building        (make_numeric_scale)                            ║
╚════════════════════════════════════════════════════════════════════════════╝

Typical flow:
```python
    from auto import convert, define_transform, make_numeric_scale
    from scales.extent import NumericExtentDetail

    field = convert(raw_field)
    define_transform(field)
    extent = NumericExtentDetail.make_for_field(field)
    scale = make_numeric_scale(extent, True, [0.0, 0.0], 0.1, 0, False)
```

Exports resolve lazily on first access.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Tuple

_LAZY_EXPORTS: Dict[str, Tuple[str, str]] = {
    # Ingestion
    "convert": ("auto.type_inferencer", "convert"),
    "good_lists": ("auto.type_inferencer", "good_lists"),
    "is_yearly": ("auto.type_inferencer", "is_yearly"),

    # Analysis
    "define_transform": ("auto.transform_selector", "define_transform"),
    "transform_for_skew": ("auto.transform_selector", "transform_for_skew"),
    "optimal_bin_count": ("auto.bin_estimator", "optimal_bin_count"),

    # Axis construction
    "make_numeric_scale": ("auto.scale_builder", "make_numeric_scale"),
}

__all__ = tuple(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    """Load the defining module on first access and cache the symbol."""
    if name in _LAZY_EXPORTS:
        module_name, symbol_name = _LAZY_EXPORTS[name]
        obj = getattr(import_module(module_name), symbol_name)
        globals()[name] = obj
        return obj
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> List[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_EXPORTS.keys())))
