"""Wire enumerations for attribute view values."""

from __future__ import annotations

from enum import Enum


class KeyType(str, Enum):
    BLOCK = "block"
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    MSELECT = "mSelect"
    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    MASSET = "mAsset"
    TEMPLATE = "template"
    CREATED = "created"
    UPDATED = "updated"
    CHECKBOX = "checkbox"
    RELATION = "relation"
    ROLLUP = "rollup"


class NumberFormat(str, Enum):
    NONE = ""
    COMMAS = "commas"
    PERCENT = "percent"
    US_DOLLAR = "usDollar"
    YUAN = "yuan"
    EURO = "euro"
    POUND = "pound"
    YEN = "yen"
    RUBLE = "ruble"
    RUPEE = "rupee"
    WON = "won"
    CANADIAN_DOLLAR = "canadianDollar"
    FRANC = "franc"


class DateFormat(str, Enum):
    NONE = ""
    DURATION = "duration"


class CreatedFormat(str, Enum):
    NONE = ""  # 2006-01-02 15:04
    DURATION = "duration"


class UpdatedFormat(str, Enum):
    NONE = ""  # 2006-01-02 15:04
    DURATION = "duration"


class AssetType(str, Enum):
    FILE = "file"
    IMAGE = "image"


class CalcOperator(str, Enum):
    NONE = ""
    COUNT_ALL = "Count all"
    COUNT_VALUES = "Count values"
    COUNT_UNIQUE_VALUES = "Count unique values"
    COUNT_EMPTY = "Count empty"
    COUNT_NOT_EMPTY = "Count not empty"
    PERCENT_EMPTY = "Percent empty"
    PERCENT_NOT_EMPTY = "Percent not empty"
    SUM = "Sum"
    AVERAGE = "Average"
    MEDIAN = "Median"
    MIN = "Min"
    MAX = "Max"
    RANGE = "Range"
    CHECKED = "Checked"
    UNCHECKED = "Unchecked"
    PERCENT_CHECKED = "Percent checked"
    PERCENT_UNCHECKED = "Percent unchecked"


# One source of truth for known value 'type' tags.
KNOWN_KEY_TYPES: frozenset[str] = frozenset(t.value for t in KeyType)
