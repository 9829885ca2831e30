from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

from ..settings import _env_extra_mode
from ..utils import underscore_to_camelcase

_EXTRA = _env_extra_mode()


class AVModel(BaseModel):
    """
    Project-wide base model for attribute view wire objects.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    wire keys are ignored by default; switch at runtime by setting an env var
    before import:
      export ATTRVIEW_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        alias_generator=underscore_to_camelcase,
        populate_by_name=True,
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def _enum_value(v):
    # Enum members are stored by their wire string
    return v.value if isinstance(v, Enum) else v


def _float_to_wire(v: float) -> Union[int, float]:
    # Integral floats go out as `3`, not `3.0`
    if v == v and abs(v) < 1e21 and v.is_integer():
        return int(v)
    return v


# Free-form string drawn from one of the enums below; unknown strings survive.
EnumStr = Annotated[str, BeforeValidator(_enum_value)]

WireFloat = Annotated[
    float,
    PlainSerializer(_float_to_wire, return_type=Union[int, float], when_used="json"),
]

# A `null` list on the wire reads as empty
StrList = Annotated[List[str], BeforeValidator(lambda v: [] if v is None else v)]


__all__ = ["AVModel", "EnumStr", "WireFloat", "StrList"]
