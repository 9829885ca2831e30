"""
Attribute view cell values: one model per key type, discriminated on ``type``.

Each variant owns exactly one payload slot, so a ``TextValue`` cannot carry a
number and a ``NumberValue`` cannot carry text. The slot itself may be absent;
rendering treats an absent payload as the empty string.

Public surface:
  - ``parse_value(obj)`` / ``value_from_json(text)``: decode the wire shape
  - ``value.render()`` (also ``str(value)``): the display string
  - ``value.to_json()`` / ``value.clone()``: encode / deep-copy
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import (
    Field,
    SerializeAsAny,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_serializer,
)

from ..exceptions import ValueDecodeError
from ._base import AVModel, EnumStr
from .enums import KNOWN_KEY_TYPES, CalcOperator
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

LOGGER = logging.getLogger(__name__)

CHECKED_MARK = "√"


def _is_empty(v: Any) -> bool:
    return v is None or v is False or v == "" or v == []


class _ValueBase(AVModel):
    id: str = ""
    key_id: str = Field(default="", alias="keyID")
    block_id: str = Field(default="", alias="blockID")
    # Every variant narrows 'type' to its own literal tag
    type: str = ""
    is_detached: bool = False

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        """Drop empty scalars, absent payloads and empty lists from the wire form."""
        data = handler(self)
        return {k: v for k, v in data.items() if not _is_empty(v)}

    def render(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render()

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def clone(self) -> "Value":
        """Deep copy through the wire form; nothing is shared with ``self``."""
        return value_from_json(self.to_json())


class BlockValue(_ValueBase):
    type: Literal["block"] = "block"
    block: Optional[ValueBlock] = None

    def render(self) -> str:
        if self.block is None:
            return ""
        return self.block.content


class TextValue(_ValueBase):
    type: Literal["text"] = "text"
    text: Optional[ValueText] = None

    def render(self) -> str:
        if self.text is None:
            return ""
        return self.text.content.strip()


class NumberValue(_ValueBase):
    type: Literal["number"] = "number"
    number: Optional[ValueNumber] = None

    def render(self) -> str:
        if self.number is None:
            return ""
        return self.number.formatted_content


class DateValue(_ValueBase):
    type: Literal["date"] = "date"
    date: Optional[ValueDate] = None

    def render(self) -> str:
        if self.date is None:
            return ""
        return self.date.formatted_content


class SelectValue(_ValueBase):
    type: Literal["select"] = "select"
    m_select: List[ValueSelect] = Field(default_factory=list)

    def render(self) -> str:
        if not self.m_select:
            return ""
        return self.m_select[0].content


class MultiSelectValue(_ValueBase):
    type: Literal["mSelect"] = "mSelect"
    m_select: List[ValueSelect] = Field(default_factory=list)

    def render(self) -> str:
        return " ".join(s.content for s in self.m_select)


class URLValue(_ValueBase):
    type: Literal["url"] = "url"
    url: Optional[ValueURL] = None

    def render(self) -> str:
        if self.url is None:
            return ""
        return self.url.content


class EmailValue(_ValueBase):
    type: Literal["email"] = "email"
    email: Optional[ValueEmail] = None

    def render(self) -> str:
        if self.email is None:
            return ""
        return self.email.content


class PhoneValue(_ValueBase):
    type: Literal["phone"] = "phone"
    phone: Optional[ValuePhone] = None

    def render(self) -> str:
        if self.phone is None:
            return ""
        return self.phone.content


class MultiAssetValue(_ValueBase):
    type: Literal["mAsset"] = "mAsset"
    m_asset: List[ValueAsset] = Field(default_factory=list)

    def render(self) -> str:
        return " ".join(a.content for a in self.m_asset)


class TemplateValue(_ValueBase):
    type: Literal["template"] = "template"
    template: Optional[ValueTemplate] = None

    def render(self) -> str:
        if self.template is None:
            return ""
        return self.template.content.strip()


class CreatedValue(_ValueBase):
    type: Literal["created"] = "created"
    created: Optional[ValueCreated] = None

    def render(self) -> str:
        if self.created is None:
            return ""
        return self.created.formatted_content


class UpdatedValue(_ValueBase):
    type: Literal["updated"] = "updated"
    updated: Optional[ValueUpdated] = None

    def render(self) -> str:
        if self.updated is None:
            return ""
        return self.updated.formatted_content


class CheckboxValue(_ValueBase):
    type: Literal["checkbox"] = "checkbox"
    checkbox: Optional[ValueCheckbox] = None

    def render(self) -> str:
        if self.checkbox is None or not self.checkbox.checked:
            return ""
        return CHECKED_MARK


class RelationValue(_ValueBase):
    type: Literal["relation"] = "relation"
    relation: Optional[ValueRelation] = None

    def render(self) -> str:
        if self.relation is None:
            return ""
        return " ".join(self.relation.contents)


class RollupValue(_ValueBase):
    type: Literal["rollup"] = "rollup"
    rollup: Optional[ValueRollup] = None

    def render(self) -> str:
        if self.rollup is None:
            return ""
        return " ".join(self.rollup.contents)

    def with_rollup(self, calc: Optional["RollupCalc"]) -> "RollupValue":
        """Return a copy of this cell with its contents reduced by ``calc``."""
        if self.rollup is None:
            return self.model_copy(deep=True)
        return self.model_copy(update={"rollup": self.rollup.render_contents(calc)})


class UnknownValue(_ValueBase):
    """Value whose ``type`` tag this library does not know; always renders empty."""

    type: str = ""


KnownValue = Annotated[
    Union[
        BlockValue,
        TextValue,
        NumberValue,
        DateValue,
        SelectValue,
        MultiSelectValue,
        URLValue,
        EmailValue,
        PhoneValue,
        MultiAssetValue,
        TemplateValue,
        CreatedValue,
        UpdatedValue,
        CheckboxValue,
        RelationValue,
        RollupValue,
    ],
    Field(discriminator="type"),
]

Value = Union[
    BlockValue,
    TextValue,
    NumberValue,
    DateValue,
    SelectValue,
    MultiSelectValue,
    URLValue,
    EmailValue,
    PhoneValue,
    MultiAssetValue,
    TemplateValue,
    CreatedValue,
    UpdatedValue,
    CheckboxValue,
    RelationValue,
    RollupValue,
    UnknownValue,
]

_KNOWN_ADAPTER: TypeAdapter = TypeAdapter(KnownValue)


def parse_value(obj: Any) -> Value:
    """
    Decode one value from its wire dict.

    Known tags dispatch to their variant; any other tag becomes an
    ``UnknownValue`` rather than an error. Already-decoded values pass through.
    """
    if isinstance(obj, _ValueBase):
        return obj
    if not isinstance(obj, dict):
        raise ValueDecodeError(
            f"expected a JSON object for a value, got {type(obj).__name__}"
        )

    tag = obj.get("type")
    try:
        if isinstance(tag, str) and tag in KNOWN_KEY_TYPES:
            return _KNOWN_ADAPTER.validate_python(obj)
        LOGGER.debug("attrview.value.unknown_type type=%r", tag)
        return UnknownValue.model_validate(obj)
    except ValidationError as e:
        raise ValueDecodeError(f"invalid {tag or 'untyped'} value", e.errors()) from e


def value_from_json(data: Union[str, bytes]) -> Value:
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueDecodeError(f"malformed value JSON: {e.msg}") from e
    return parse_value(obj)


def render(value: Optional[Value]) -> str:
    """Display string of ``value``; ``None`` renders empty."""
    if value is None:
        return ""
    return value.render()


class RollupCalc(AVModel):
    """Rollup configuration: the operator and, once computed, its result cell."""

    operator: EnumStr = CalcOperator.NONE.value
    result: Optional[SerializeAsAny[_ValueBase]] = None

    @field_validator("result", mode="before")
    @classmethod
    def _dispatch_result(cls, v):
        if v is None or isinstance(v, _ValueBase):
            return v
        try:
            return parse_value(v)
        except ValueDecodeError as e:
            raise ValueError(str(e)) from e


__all__ = [
    "Value",
    "KnownValue",
    "BlockValue",
    "TextValue",
    "NumberValue",
    "DateValue",
    "SelectValue",
    "MultiSelectValue",
    "URLValue",
    "EmailValue",
    "PhoneValue",
    "MultiAssetValue",
    "TemplateValue",
    "CreatedValue",
    "UpdatedValue",
    "CheckboxValue",
    "RelationValue",
    "RollupValue",
    "UnknownValue",
    "RollupCalc",
    "parse_value",
    "value_from_json",
    "render",
]
