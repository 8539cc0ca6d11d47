# config/__init__.py
"""
AutoAxis configuration package.

```
    config/
    ├── settings.py          # Settings (pydantic-settings)
    ├── constants.py         # heuristic thresholds
    └── logging_config.py    # loguru sinks
```

``Settings`` and ``get_settings`` are loaded on first access. The settings
instance lives at ``config.settings.settings``; the package attribute
``config.settings`` is the submodule.

```python
    from config import get_settings, use_test_settings

    use_test_settings(AUTO_RANDOM_SEED=7)
    get_settings().AUTO_RANDOM_SEED   # 7
```
"""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version as _pkg_version
from typing import Any, Dict, List, Tuple

try:
    __version__ = _pkg_version("autoaxis")
except PackageNotFoundError:
    __version__ = "1.0.0-dev"

_LAZY_EXPORTS: Dict[str, Tuple[str, str]] = {
    "Settings": ("config.settings", "Settings"),
    "get_settings": ("config.settings", "get_settings"),
}

__all__ = ("__version__", "Settings", "get_settings", "use_test_settings")


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(import_module(target[0]), target[1])
    globals()[name] = value
    return value


def __dir__() -> List[str]:
    return sorted({*globals(), *_LAZY_EXPORTS})


def use_test_settings(**overrides: Any) -> None:
    """
    Assign ``overrides`` on the global settings instance.

    Values are validated (``validate_assignment``) and stay in place until
    changed again; the ``test_settings`` fixture restores them.
    """
    from config.settings import settings
    from core.exceptions import ConfigurationError

    unknown = sorted(k for k in overrides if k not in type(settings).model_fields)
    if unknown:
        raise ConfigurationError(
            f"unknown setting(s): {', '.join(unknown)}",
            details={"allowed": sorted(type(settings).model_fields)},
        )

    for key, value in overrides.items():
        setattr(settings, key, value)
