"""
Locale-aware decimal formatting seam.

Number formatting never hardcodes grouping or decimal symbols; it asks a
``LocaleFormatter`` for "this amount, N fraction digits, in locale X". The
default implementation reads CLDR data through Babel. Callers may pass any
object satisfying the protocol (e.g. a fake in tests).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Dict, Optional, Protocol

from babel import Locale
from babel.numbers import format_decimal, get_currency_precision

from ..models.enums import NumberFormat
from ..utils import format_float

LOGGER = logging.getLogger(__name__)


class LocaleFormatter(Protocol):
    """Minimal number formatting service required by the value formatters."""

    def format_decimal(self, amount: float, fraction_digits: int, locale: str) -> str: ...


@lru_cache(maxsize=64)
def _fixed_pattern(locale: str, fraction_digits: int) -> str:
    # Keep the locale's integer grouping, force an exact fraction width
    standard = Locale.parse(locale).decimal_formats[None].pattern
    integer_part = standard.split(";")[0].split(".")[0]
    if fraction_digits <= 0:
        return integer_part
    return integer_part + "." + "0" * fraction_digits


class BabelLocaleFormatter:
    """CLDR-backed ``LocaleFormatter``."""

    def format_decimal(self, amount: float, fraction_digits: int, locale: str) -> str:
        if not math.isfinite(amount):
            return format_float(amount)
        pattern = _fixed_pattern(locale, fraction_digits)
        # Decimal(float) is exact, so rounding sees the true binary value
        return format_decimal(Decimal(amount), format=pattern, locale=locale)


@dataclass(frozen=True)
class CurrencySpec:
    code: str
    symbol: str
    locale: str

    @property
    def fraction_digits(self) -> int:
        return get_currency_precision(self.code)


CURRENCIES: Dict[NumberFormat, CurrencySpec] = {
    NumberFormat.US_DOLLAR: CurrencySpec("USD", "$", "en"),
    NumberFormat.YUAN: CurrencySpec("CNY", "CN¥", "zh"),
    NumberFormat.EURO: CurrencySpec("EUR", "€", "de"),
    NumberFormat.POUND: CurrencySpec("GBP", "£", "en"),
    NumberFormat.YEN: CurrencySpec("JPY", "¥", "ja"),
    NumberFormat.RUBLE: CurrencySpec("RUB", "₽", "ru"),
    NumberFormat.RUPEE: CurrencySpec("INR", "₹", "hi"),
    NumberFormat.WON: CurrencySpec("KRW", "₩", "ko"),
    NumberFormat.CANADIAN_DOLLAR: CurrencySpec("CAD", "CA$", "en"),
    NumberFormat.FRANC: CurrencySpec("CHF", "CHF", "fr"),
}

_DEFAULT_FORMATTER = BabelLocaleFormatter()


def get_locale_formatter(formatter: Optional[LocaleFormatter] = None) -> LocaleFormatter:
    return formatter if formatter is not None else _DEFAULT_FORMATTER


__all__ = [
    "LocaleFormatter",
    "BabelLocaleFormatter",
    "CurrencySpec",
    "CURRENCIES",
    "get_locale_formatter",
]
