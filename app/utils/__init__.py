"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Lenient coercion of raw form values

==============================================================================
"""

from .validators import FieldCoercer

__all__ = [
    "FieldCoercer",
]
