"""Directional rounding at a decimal precision."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# Floats at or above this magnitude have no fractional part
_INTEGRAL = 2.0**52


def _scale(precision: int) -> float:
    return 10.0**precision


def _is_integral(scaled: float) -> bool:
    return not math.isfinite(scaled) or abs(scaled) >= _INTEGRAL


def round_up(val: float, precision: int) -> float:
    """Round towards +inf, like 12.3416 -> 12.35."""
    p = _scale(precision)
    scaled = val * p
    if _is_integral(scaled):
        return scaled / p
    return math.ceil(scaled) / p


def round_down(val: float, precision: int) -> float:
    """Round towards -inf, like 12.3496 -> 12.34."""
    p = _scale(precision)
    scaled = val * p
    if _is_integral(scaled):
        return scaled / p
    return math.floor(scaled) / p


def round_half(val: float, precision: int) -> float:
    """Round to nearest with halves away from zero, like 12.3456 -> 12.35."""
    p = _scale(precision)
    scaled = val * p
    if _is_integral(scaled):
        return scaled / p
    # ROUND_HALF_UP on Decimal is half-away-from-zero; round() would be half-even
    return float(Decimal(scaled).quantize(Decimal(1), rounding=ROUND_HALF_UP)) / p


__all__ = ["round_up", "round_down", "round_half"]
