"""Cell formatting, pure and side-effect free.

Contains:
- locale: the LocaleFormatter seam and its Babel-backed default
- number: number cell rendering (plain, grouped, percent, currencies)
- dates: date / created / updated rendering, including durations
- rounding: directional rounding helpers
"""

from .dates import (
    format_timestamp_range,
    humanize_rel_time,
    new_formatted_value_created,
    new_formatted_value_date,
    new_formatted_value_updated,
)
from .locale import BabelLocaleFormatter, LocaleFormatter
from .number import format_number, new_formatted_value_number, new_value_number
from .rounding import round_down, round_half, round_up

__all__ = [
    "BabelLocaleFormatter",
    "LocaleFormatter",
    "format_number",
    "format_timestamp_range",
    "humanize_rel_time",
    "new_formatted_value_created",
    "new_formatted_value_date",
    "new_formatted_value_number",
    "new_formatted_value_updated",
    "new_value_number",
    "round_down",
    "round_half",
    "round_up",
]
