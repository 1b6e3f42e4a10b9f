"""
Numeric helpers shared by the scoring and recommendation modules.

Python's built-in ``round()`` uses banker's rounding (``round(12.5) == 12``).
Soil scores and fertilizer quantities are rounded half-up instead
(``12.5 -> 13``, ``7.25 -> 7.3``) so published figures stay stable across
the whole system.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties rounding towards +inf.

    Args:
        value:   Number to round.
        ndigits: Decimal places to keep (>= 0).

    Returns:
        Rounded float.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer.

    Raises:
        ValueError: If ``value`` is infinite or NaN.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r} to an integer.")
    return int(math.floor(value + 0.5))
