"""Public exports for attribute view data models."""

from __future__ import annotations

from .enums import (
    AssetType,
    CalcOperator,
    CreatedFormat,
    DateFormat,
    KeyType,
    NumberFormat,
    UpdatedFormat,
)
from .payloads import (
    ValueAsset,
    ValueBlock,
    ValueCheckbox,
    ValueCreated,
    ValueDate,
    ValueEmail,
    ValueNumber,
    ValuePhone,
    ValueRelation,
    ValueRollup,
    ValueSelect,
    ValueTemplate,
    ValueText,
    ValueUpdated,
    ValueURL,
)
from .value import (
    BlockValue,
    CheckboxValue,
    CreatedValue,
    DateValue,
    EmailValue,
    MultiAssetValue,
    MultiSelectValue,
    NumberValue,
    PhoneValue,
    RelationValue,
    RollupCalc,
    RollupValue,
    SelectValue,
    TemplateValue,
    TextValue,
    UnknownValue,
    UpdatedValue,
    URLValue,
    Value,
    parse_value,
    render,
    value_from_json,
)

__all__ = [
    "AssetType",
    "CalcOperator",
    "CreatedFormat",
    "DateFormat",
    "KeyType",
    "NumberFormat",
    "UpdatedFormat",
    "ValueAsset",
    "ValueBlock",
    "ValueCheckbox",
    "ValueCreated",
    "ValueDate",
    "ValueEmail",
    "ValueNumber",
    "ValuePhone",
    "ValueRelation",
    "ValueRollup",
    "ValueSelect",
    "ValueTemplate",
    "ValueText",
    "ValueUpdated",
    "ValueURL",
    "Value",
    "BlockValue",
    "CheckboxValue",
    "CreatedValue",
    "DateValue",
    "EmailValue",
    "MultiAssetValue",
    "MultiSelectValue",
    "NumberValue",
    "PhoneValue",
    "RelationValue",
    "RollupCalc",
    "RollupValue",
    "SelectValue",
    "TemplateValue",
    "TextValue",
    "UnknownValue",
    "UpdatedValue",
    "URLValue",
    "parse_value",
    "render",
    "value_from_json",
]
