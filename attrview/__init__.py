"""Typed attribute view cell values: rendering, formatting and rollups."""

from .exceptions import AttrViewException, ValueDecodeError
from .formatting import (
    format_number,
    new_formatted_value_created,
    new_formatted_value_date,
    new_formatted_value_number,
    new_formatted_value_updated,
    new_value_number,
    round_down,
    round_half,
    round_up,
)
from .models import (
    CalcOperator,
    KeyType,
    NumberFormat,
    RollupCalc,
    Value,
    parse_value,
    render,
    value_from_json,
)
from .rollup import aggregate

__all__ = [
    "AttrViewException",
    "ValueDecodeError",
    "CalcOperator",
    "KeyType",
    "NumberFormat",
    "RollupCalc",
    "Value",
    "aggregate",
    "format_number",
    "new_formatted_value_created",
    "new_formatted_value_date",
    "new_formatted_value_number",
    "new_formatted_value_updated",
    "new_value_number",
    "parse_value",
    "render",
    "round_down",
    "round_half",
    "round_up",
    "value_from_json",
]
