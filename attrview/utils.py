"""Small helpers shared by the models and formatters."""

from __future__ import annotations

import math
from decimal import Decimal


def underscore_to_camelcase(word: str, initial_capital: bool = False) -> str:
    """Transform a snake_case field name to camelCase."""
    words = [x.capitalize() or "_" for x in word.split("_")]
    if not initial_capital:
        words[0] = words[0].lower()

    return "".join(words)


def trim_fraction(s: str) -> str:
    """Drop trailing zeros, then a trailing decimal point: ``"1.50"`` -> ``"1.5"``."""
    return s.rstrip("0").rstrip(".")


def format_float(value: float) -> str:
    """
    Shortest plain decimal that round-trips ``value``.

    No exponent notation, no trailing ``.0``: ``3.0`` -> ``"3"``,
    ``1e21`` -> ``"1000000000000000000000"``. Non-finite values render as
    ``"NaN"``, ``"+Inf"`` and ``"-Inf"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    s = format(Decimal(repr(value)), "f")
    if "." in s:
        s = trim_fraction(s)
    return s


def parse_float(s: str) -> float:
    """Parse a rendered cell string; anything unparsable reads as ``0``."""
    if "_" in s or s != s.strip():
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0
