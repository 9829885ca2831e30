"""
Rollup aggregation over the rendered strings of related cells.

Inputs are display strings, not typed values: numeric operators re-parse
them (anything unparsable reads as 0) and checkbox operators compare against
the rendered checkmark. Every operator except ``NONE`` and an empty
``MEDIAN`` reduces the list to a single summary string.
"""

from __future__ import annotations

import logging
import statistics
import sys
from typing import Callable, Dict, List, Sequence, Union

from .models.enums import CalcOperator
from .models.value import CHECKED_MARK
from .utils import format_float, parse_float

LOGGER = logging.getLogger(__name__)

# Seeds for Min/Max when nothing qualifies
_MAX_FLOAT = sys.float_info.max


def _numbers(contents: Sequence[str]) -> List[float]:
    return [parse_float(v) for v in contents if v != ""]


def _percent(part: int, total: int) -> List[str]:
    # An empty list has no share of anything
    if total == 0:
        return ["0%"]
    return [f"{part * 100 // total}%"]


def _count_empty(contents: Sequence[str]) -> int:
    return sum(1 for v in contents if v == "")


def _count_checked(contents: Sequence[str]) -> int:
    return sum(1 for v in contents if v == CHECKED_MARK)


def _sum(numbers: List[float]) -> float:
    # Left to right, one addition at a time; no compensated summation
    total = 0.0
    for n in numbers:
        total += n
    return total


def _lowest(numbers: List[float]) -> float:
    lo = _MAX_FLOAT
    for n in numbers:
        if n < lo:
            lo = n
    return lo


def _highest(numbers: List[float]) -> float:
    hi = -_MAX_FLOAT
    for n in numbers:
        if n > hi:
            hi = n
    return hi


def _average(contents: Sequence[str]) -> List[str]:
    numbers = _numbers(contents)
    if not numbers:
        return ["NaN"]
    return [format_float(_sum(numbers) / len(numbers))]


def _median(contents: Sequence[str]) -> List[str]:
    numbers = _numbers(contents)
    if not numbers:
        return list(contents)
    return [format_float(statistics.median(numbers))]


def _range(contents: Sequence[str]) -> List[str]:
    numbers = _numbers(contents)
    return [format_float(_highest(numbers) - _lowest(numbers))]


_Reducer = Callable[[Sequence[str]], List[str]]

_REDUCERS: Dict[CalcOperator, _Reducer] = {
    CalcOperator.NONE: list,
    CalcOperator.COUNT_ALL: lambda c: [str(len(c))],
    CalcOperator.COUNT_VALUES: lambda c: [str(len(c))],
    CalcOperator.COUNT_UNIQUE_VALUES: lambda c: [str(len(set(c)))],
    CalcOperator.COUNT_EMPTY: lambda c: [str(_count_empty(c))],
    CalcOperator.COUNT_NOT_EMPTY: lambda c: [str(len(c) - _count_empty(c))],
    CalcOperator.PERCENT_EMPTY: lambda c: _percent(_count_empty(c), len(c)),
    CalcOperator.PERCENT_NOT_EMPTY: lambda c: _percent(
        len(c) - _count_empty(c), len(c)
    ),
    CalcOperator.SUM: lambda c: [format_float(_sum(_numbers(c)))],
    CalcOperator.AVERAGE: _average,
    CalcOperator.MEDIAN: _median,
    CalcOperator.MIN: lambda c: [format_float(_lowest(_numbers(c)))],
    CalcOperator.MAX: lambda c: [format_float(_highest(_numbers(c)))],
    CalcOperator.RANGE: _range,
    CalcOperator.CHECKED: lambda c: [str(_count_checked(c))],
    CalcOperator.UNCHECKED: lambda c: [str(len(c) - _count_checked(c))],
    CalcOperator.PERCENT_CHECKED: lambda c: _percent(_count_checked(c), len(c)),
    CalcOperator.PERCENT_UNCHECKED: lambda c: _percent(
        len(c) - _count_checked(c), len(c)
    ),
}


def aggregate(
    contents: Sequence[str], operator: Union[CalcOperator, str]
) -> List[str]:
    """
    Reduce ``contents`` with ``operator`` and return a new list.

    The input sequence is never modified. Unknown operator strings behave
    like ``CalcOperator.NONE``.
    """
    try:
        op = CalcOperator(operator)
    except ValueError:
        LOGGER.debug("attrview.rollup.unknown_operator op=%r", operator)
        op = CalcOperator.NONE

    result = _REDUCERS[op](contents)
    LOGGER.debug(
        "attrview.rollup.aggregate op=%r n=%d -> %d", op.value, len(contents), len(result)
    )
    return result


__all__ = ["aggregate", "CHECKED_MARK"]
