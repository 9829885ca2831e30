"""
Date, created-time and updated-time formatting.

Timestamps are milliseconds since the Unix epoch. Absolute renderings use the
display time zone from settings (host local time when unset); the duration
format replaces them with a humanized distance such as "3 days".
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

import humanize

from ..models.enums import CreatedFormat, DateFormat, UpdatedFormat
from ..models.payloads import ValueCreated, ValueDate, ValueUpdated
from ..settings import get_settings

LOGGER = logging.getLogger(__name__)

DATE_LAYOUT = "%Y-%m-%d"
DATETIME_LAYOUT = "%Y-%m-%d %H:%M"
RANGE_SEPARATOR = " → "

DURATION = "duration"

# What datetime raises for instants outside years 1..9999
_OUT_OF_RANGE = (ValueError, OverflowError, OSError)

_Format = Union[DateFormat, CreatedFormat, UpdatedFormat, str]


def from_millis(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=get_settings().tzinfo)


def format_timestamp(ms: int, is_not_time: bool) -> str:
    """Absolute rendering of ``ms``; empty when it cannot be represented."""
    try:
        t = from_millis(ms)
    except _OUT_OF_RANGE:
        LOGGER.debug("attrview.dates.out_of_range ms=%d", ms)
        return ""
    return t.strftime(DATE_LAYOUT if is_not_time else DATETIME_LAYOUT)


def humanize_rel_time(t1: datetime, t2: datetime, lang: Optional[str] = None) -> str:
    """
    Distance between ``t1`` and ``t2`` as a phrase in ``lang``.

    English needs no catalog; other languages use humanize's bundled
    translations and fall back to English when none is shipped.
    """
    lang = lang or get_settings().lang
    delta = abs(t2 - t1)
    if lang.lower().startswith("en"):
        return humanize.naturaldelta(delta)

    try:
        humanize.i18n.activate(lang)
    except FileNotFoundError:
        LOGGER.debug("attrview.dates.no_translation lang=%s", lang)
        return humanize.naturaldelta(delta)
    try:
        return humanize.naturaldelta(delta)
    finally:
        humanize.i18n.deactivate()


def format_timestamp_range(
    content: int,
    content2: int,
    fmt: _Format,
    is_not_time: bool,
    lang: Optional[str] = None,
) -> str:
    """Absolute ``content`` (``→ content2`` when set), or the duration between them."""
    if fmt == DURATION:
        try:
            t1, t2 = from_millis(content), from_millis(content2)
        except _OUT_OF_RANGE:
            LOGGER.debug("attrview.dates.out_of_range ms=%d,%d", content, content2)
            return ""
        return humanize_rel_time(t1, t2, lang)

    formatted = format_timestamp(content, is_not_time)
    if content2 > 0:
        end = format_timestamp(content2, is_not_time)
        if end:
            formatted += RANGE_SEPARATOR + end
    return formatted


def new_formatted_value_date(
    content: int,
    content2: int,
    fmt: Union[DateFormat, str],
    is_not_time: bool,
) -> ValueDate:
    # The result always reports a date-only value without an end date,
    # whatever granularity was used for the rendering.
    return ValueDate(
        content=content,
        content2=content2,
        has_end_date=False,
        is_not_time=True,
        formatted_content=format_timestamp_range(content, content2, fmt, is_not_time),
    )


def new_formatted_value_created(
    content: int,
    content2: int,
    fmt: Union[CreatedFormat, str],
    is_not_time: bool = False,
) -> ValueCreated:
    return ValueCreated(
        content=content,
        content2=content2,
        formatted_content=format_timestamp_range(content, content2, fmt, is_not_time),
    )


def new_formatted_value_updated(
    content: int,
    content2: int,
    fmt: Union[UpdatedFormat, str],
    is_not_time: bool = False,
) -> ValueUpdated:
    return ValueUpdated(
        content=content,
        content2=content2,
        formatted_content=format_timestamp_range(content, content2, fmt, is_not_time),
    )


__all__ = [
    "format_timestamp",
    "format_timestamp_range",
    "humanize_rel_time",
    "from_millis",
    "new_formatted_value_date",
    "new_formatted_value_created",
    "new_formatted_value_updated",
]
