"""Number cell formatting: plain, grouped, percent and currency renderings."""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from ..models.enums import NumberFormat
from ..models.payloads import ValueNumber
from ..utils import format_float, trim_fraction
from .locale import CURRENCIES, LocaleFormatter, get_locale_formatter

LOGGER = logging.getLogger(__name__)

# Grouped rendering keeps this many digits before trimming
_COMMAS_DIGITS = 6
# Constructors cap plain rendering at this many digits
_PLAIN_DIGITS = 5


def _as_format(fmt: Union[NumberFormat, str]) -> Optional[NumberFormat]:
    try:
        return NumberFormat(fmt)
    except ValueError:
        LOGGER.debug("attrview.number.unknown_format format=%r", fmt)
        return None


def format_number(
    content: float,
    fmt: Union[NumberFormat, str],
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """
    Render ``content`` according to ``fmt``.

    ``NumberFormat.NONE`` and unknown formats give the shortest plain decimal.
    Currency formats delegate grouping and decimal symbols to ``formatter``
    (Babel by default).
    """
    number_format = _as_format(fmt)
    if number_format is None or number_format is NumberFormat.NONE:
        return format_float(content)

    lf = get_locale_formatter(formatter)
    if number_format is NumberFormat.COMMAS:
        return trim_fraction(lf.format_decimal(content, _COMMAS_DIGITS, "en"))
    if number_format is NumberFormat.PERCENT:
        scaled = content * 100
        if not math.isfinite(scaled):
            return format_float(scaled) + "%"
        return trim_fraction(f"{scaled:.2f}") + "%"

    currency = CURRENCIES[number_format]
    return currency.symbol + lf.format_decimal(
        content, currency.fraction_digits, currency.locale
    )


def new_value_number(content: float) -> ValueNumber:
    return new_formatted_value_number(content, NumberFormat.NONE)


def new_formatted_value_number(
    content: float,
    fmt: Union[NumberFormat, str],
    formatter: Optional[LocaleFormatter] = None,
) -> ValueNumber:
    """Build a non-empty number payload with its rendering precomputed."""
    if _as_format(fmt) is NumberFormat.NONE:
        if math.isfinite(content):
            formatted = trim_fraction(f"{content:.{_PLAIN_DIGITS}f}")
        else:
            formatted = format_float(content)
    else:
        formatted = format_number(content, fmt, formatter)

    return ValueNumber(
        content=content,
        is_not_empty=True,
        format=fmt,
        formatted_content=formatted,
    )


__all__ = ["format_number", "new_value_number", "new_formatted_value_number"]
