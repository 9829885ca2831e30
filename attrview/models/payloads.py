"""
Typed payloads carried by attribute view values.

Field names are snake_case here and camelCase on the wire; every payload
field is always emitted when the payload itself is present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from ._base import AVModel, EnumStr, StrList, WireFloat
from .enums import AssetType, NumberFormat

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from ..formatting.locale import LocaleFormatter
    from .value import RollupCalc


class ValueBlock(AVModel):
    """Snapshot of the block a row is bound to."""

    id: str = ""
    content: str = ""
    created: int = 0
    updated: int = 0


class ValueText(AVModel):
    content: str = ""


class ValueNumber(AVModel):
    content: WireFloat = 0.0
    is_not_empty: bool = False
    format: EnumStr = NumberFormat.NONE.value
    # Cached rendering of `content`; refresh with `format_number()`
    formatted_content: str = ""

    def format_number(self, formatter: Optional["LocaleFormatter"] = None) -> None:
        """Re-render ``formatted_content`` after ``content`` or ``format`` changed."""
        from ..formatting.number import format_number

        self.formatted_content = format_number(self.content, self.format, formatter)


class ValueDate(AVModel):
    content: int = 0
    is_not_empty: bool = False
    has_end_date: bool = False
    is_not_time: bool = False
    content2: int = 0
    is_not_empty2: bool = False
    formatted_content: str = ""


class ValueSelect(AVModel):
    content: str = ""
    color: str = ""


class ValueURL(AVModel):
    content: str = ""


class ValueEmail(AVModel):
    content: str = ""


class ValuePhone(AVModel):
    content: str = ""


class ValueAsset(AVModel):
    type: EnumStr = AssetType.FILE.value
    name: str = ""
    content: str = ""


class ValueTemplate(AVModel):
    content: str = ""


class ValueCreated(AVModel):
    content: int = 0
    is_not_empty: bool = False
    content2: int = 0
    is_not_empty2: bool = False
    formatted_content: str = ""


class ValueUpdated(AVModel):
    content: int = 0
    is_not_empty: bool = False
    content2: int = 0
    is_not_empty2: bool = False
    formatted_content: str = ""


class ValueCheckbox(AVModel):
    checked: bool = False


class ValueRelation(AVModel):
    """Linked rows: ``contents[i]`` is the rendered text of ``block_ids[i]``."""

    contents: StrList = Field(default_factory=list)
    block_ids: StrList = Field(default_factory=list, alias="blockIDs")


class ValueRollup(AVModel):
    contents: StrList = Field(default_factory=list)

    def render_contents(self, calc: Optional["RollupCalc"]) -> "ValueRollup":
        """
        Return a new rollup whose contents are reduced by ``calc.operator``.

        This payload is left untouched, so a rollup shared between readers
        never changes under them. ``calc=None`` yields an unchanged copy.
        """
        from ..rollup import aggregate

        if calc is None:
            return ValueRollup(contents=list(self.contents))
        return ValueRollup(contents=aggregate(self.contents, calc.operator))


__all__ = [
    "ValueBlock",
    "ValueText",
    "ValueNumber",
    "ValueDate",
    "ValueSelect",
    "ValueURL",
    "ValueEmail",
    "ValuePhone",
    "ValueAsset",
    "ValueTemplate",
    "ValueCreated",
    "ValueUpdated",
    "ValueCheckbox",
    "ValueRelation",
    "ValueRollup",
]
