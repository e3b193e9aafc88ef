"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- dependencies: FastAPI dependencies for the registry and product board
  (import from app.core.dependencies directly)

Usage:
------
    from app.core import AppException, UnregisteredTypeError

    # Or use exception factory functions via module
    from app.core import exceptions
    raise exceptions.product_not_found(product_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    MustOverrideError,
    UnregisteredTypeError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "MustOverrideError",
    "UnregisteredTypeError",
    "register_exception_handlers",
]
