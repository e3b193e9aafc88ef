"""
==============================================================================
Field Coercion Module
==============================================================================

Lenient normalization of raw form values into product field values.

This module implements:
- FieldCoercer: Turns untrusted form input into prices, counts and text

Coercion Rules:
--------------
- Price: finite, non-negative float; anything else becomes 0.0
- Count: non-negative int (floats truncated); anything else uses the default
- Text: stripped string; empty or missing uses the default
- Choice: case-insensitive member of an allowed set; otherwise the default

Nothing here raises. Invalid input is always replaced by a default.

==============================================================================
"""

from __future__ import annotations

import math
from typing import Any, Iterable


class FieldCoercer:
    """
    Normalizer for raw form values.

    All methods are static and never raise, so product models can call
    them from "before" validators without risking a failed construction.

    Example:
        >>> FieldCoercer.price("12.5")
        12.5
        >>> FieldCoercer.price("bad")
        0.0
        >>> FieldCoercer.count("3.9", default=1)
        3
        >>> FieldCoercer.text("   ", default="Unknown")
        'Unknown'
    """

    @staticmethod
    def _to_float(value: Any) -> float:
        """Parse a number, returning NaN when the value is not numeric."""
        # bool is an int subclass; a checkbox is not a price
        if value is None or isinstance(value, bool):
            return math.nan

        if isinstance(value, (int, float)):
            return float(value)

        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return math.nan

        return math.nan

    @classmethod
    def price(cls, value: Any) -> float:
        """
        Coerce a raw price.

        Args:
            value: Raw price (number, numeric string, or anything else)

        Returns:
            Finite non-negative float, 0.0 for invalid input
        """
        number = cls._to_float(value)

        if not math.isfinite(number) or number <= 0:
            return 0.0

        return number

    @classmethod
    def count(cls, value: Any, default: int = 0) -> int:
        """
        Coerce a raw whole-number quantity (pages, warranty years).

        Args:
            value: Raw count
            default: Value used for missing, invalid, or negative input

        Returns:
            Non-negative integer
        """
        number = cls._to_float(value)

        if not math.isfinite(number) or number < 0:
            return default

        return int(number)

    @staticmethod
    def text(value: Any, default: str = "") -> str:
        """Strip a raw string, falling back to default when blank."""
        if value is None:
            return default

        text = str(value).strip()
        return text or default

    @classmethod
    def choice(cls, value: Any, allowed: Iterable[str], default: str) -> str:
        """
        Match a raw value against allowed options (case-insensitive).

        Args:
            value: Raw selection
            allowed: Valid options in canonical form
            default: Option used when nothing matches

        Returns:
            The canonical option
        """
        candidate = cls.text(value).upper()

        for option in allowed:
            if option.upper() == candidate:
                return option

        return default
