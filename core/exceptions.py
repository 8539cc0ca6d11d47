# core/exceptions.py
"""
╔════════════════════════════════════════════════════════════════════════════╗
║  AutoAxis — Exceptions                                                    ║
║  ─────────────────────────────────────────────────────────────────────────  ║
║  ✓ Centralized Exception Hierarchy                                       ║
║  ✓ Error Code & Severity System                                          ║
║  ✓ Context & Details Tracking                                            ║
║  ✓ Decorator & Context Manager                                           ║
║  ✓ Safe Execution Wrapper                                                ║
╚════════════════════════════════════════════════════════════════════════════╝

Architecture:
```
    AutoAxisException (Base)
    ├── ErrorCode (taxonomy)
    ├── ErrorSeverity (info/warning/error/critical)
    └── Context & Details

    Specific Exceptions:
    ├── FieldPropertyError      (ill-typed field property access)
    ├── ConversionError         (field conversion primitives)
    ├── ScaleConstructionError  (non-finite scale bounds)
    ├── InsufficientDataError   (empty extents / inputs)
    ├── ConfigurationError
    └── ProfilingError          (auto profiler agent)

    Helpers:
    ├── wrap_exceptions() decorator
    └── exception_context() manager
```

The auto algorithms (type inference, transform selection, bin estimation,
scale building) never raise: they degrade to safe defaults. These exceptions
are raised by the collaborators around them (fields, conversions, scales).

Usage:
```python
    from core.exceptions import ConversionError, exception_context

    with exception_context(to=ConversionError, message="Failed to convert"):
        field = to_date(field)
```

Dependencies:
    • loguru
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, Iterator, Optional, Type

from loguru import logger

# ═══════════════════════════════════════════════════════════════════════════
# Module Metadata
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "AutoAxisException",
    "FieldPropertyError",
    "ConversionError",
    "ScaleConstructionError",
    "InsufficientDataError",
    "ConfigurationError",
    "ProfilingError",
    "wrap_exceptions",
    "exception_context",
]


# ═══════════════════════════════════════════════════════════════════════════
# Error Taxonomy
# ═══════════════════════════════════════════════════════════════════════════

class ErrorSeverity(str, Enum):
    """🚨 Severity classification for errors."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCode(str, Enum):
    """🏷️ Standardized error codes for categorization."""
    UNKNOWN = "unknown_error"
    FIELD_PROPERTY = "field_property_error"
    CONVERSION = "conversion_error"
    SCALE = "scale_construction_error"
    INSUFFICIENT_DATA = "insufficient_data"
    CONFIG = "configuration_error"
    PROFILING = "profiling_error"


# ═══════════════════════════════════════════════════════════════════════════
# Base Exception
# ═══════════════════════════════════════════════════════════════════════════

class AutoAxisException(Exception):
    """
    🎯 **Base AutoAxis Exception**

    Base exception class with error code, severity, details, context and the
    original cause.

    Usage:
```python
        raise AutoAxisException(
            "Operation failed",
            details={"field": "price"},
            error_code=ErrorCode.CONVERSION,
        )
```
    """

    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        *,
        error_code: Optional[ErrorCode] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}
        self.error_code: ErrorCode = error_code or self.default_code
        self.severity: ErrorSeverity = severity
        self.context: Dict[str, Any] = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation with full context."""
        parts = [f"{self.error_code.value}: {self.message}"]

        if self.details:
            parts.append(f"Details: {self.details}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.cause:
            parts.append(f"Cause: {type(self.cause).__name__}: {self.cause}")

        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "error": {
                "code": self.error_code.value,
                "message": self.message,
                "details": self.details,
                "context": self.context,
                "severity": self.severity.value,
                "cause": str(self.cause) if self.cause else None
            }
        }

    @classmethod
    def from_exc(
        cls,
        exc: BaseException,
        *,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR
    ) -> "AutoAxisException":
        """Wrap an arbitrary exception (AutoAxis exceptions pass through)."""
        if isinstance(exc, AutoAxisException):
            return exc

        return cls(
            message or str(exc) or "An unexpected error occurred",
            details=details,
            severity=severity,
            context=context,
            cause=exc
        )


# ═══════════════════════════════════════════════════════════════════════════
# Specific Exception Classes
# ═══════════════════════════════════════════════════════════════════════════

class FieldPropertyError(AutoAxisException):
    """🔎 A field property holds a value of the wrong type."""
    default_code = ErrorCode.FIELD_PROPERTY


class ConversionError(AutoAxisException):
    """🔁 Field conversion failed."""
    default_code = ErrorCode.CONVERSION


class ScaleConstructionError(AutoAxisException):
    """📏 A scale could not be built from the given extent."""
    default_code = ErrorCode.SCALE


class InsufficientDataError(AutoAxisException):
    """📉 Not enough data to build the requested object."""
    default_code = ErrorCode.INSUFFICIENT_DATA


class ConfigurationError(AutoAxisException):
    """⚙️ Configuration error."""
    default_code = ErrorCode.CONFIG


class ProfilingError(AutoAxisException):
    """🤖 Auto profiling of a dataset failed."""
    default_code = ErrorCode.PROFILING


# ═══════════════════════════════════════════════════════════════════════════
# Helper Functions
# ═══════════════════════════════════════════════════════════════════════════

def _wrap(
    exc: Exception,
    to: Type[AutoAxisException],
    message: str,
    severity: ErrorSeverity,
    context: Optional[Dict[str, Any]],
) -> AutoAxisException:
    return to(
        message,
        details={"original_error": str(exc)},
        severity=severity,
        context=context,
        cause=exc
    )


def wrap_exceptions(
    *,
    to: Type[AutoAxisException],
    message: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    context_builder: Optional[Callable[[tuple, dict], Dict[str, Any]]] = None,
    log: bool = True
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    🎁 **Exception Wrapping Decorator**

    Example:
```python
        @wrap_exceptions(to=ScaleConstructionError, message="Scale failed")
        def make_scale(extent):
            ...
```
    """
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except AutoAxisException:
                raise
            except Exception as e:
                ctx = context_builder(args, kwargs) if context_builder else None
                wrapped = _wrap(e, to, message, severity, ctx)

                if log:
                    logger.error(str(wrapped))

                raise wrapped from e

        return wrapper
    return decorator


@contextmanager
def exception_context(
    *,
    to: Type[AutoAxisException] = AutoAxisException,
    message: str = "Operation failed",
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    context: Optional[Dict[str, Any]] = None,
    log: bool = True
) -> Iterator[None]:
    """
    🔒 **Exception Context Manager**

    Example:
```python
        with exception_context(to=ConversionError, message="Failed to parse"):
            values = [as_date(v) for v in raw]
```
    """
    try:
        yield
    except AutoAxisException:
        raise
    except Exception as e:
        wrapped = _wrap(e, to, message, severity, context)

        if log:
            logger.error(str(wrapped))

        raise wrapped from e
