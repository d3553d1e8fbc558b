"""Base model and shared field types for the 1Shot SDK."""
from __future__ import annotations

import re
from typing import Annotated, Any, List, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _check_uuid(value: str) -> str:
    if not _UUID_RE.fullmatch(value):
        raise PydanticCustomError("uuid", "Invalid uuid")
    return value


def _whole_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Scalar types are strict: no str -> int coercion, no float -> int truncation,
# and booleans are not accepted where numbers are expected. Whole floats such
# as 5.0 are accepted as integers.
Uuid = Annotated[str, Field(strict=True), AfterValidator(_check_uuid)]
Str = Annotated[str, Field(strict=True)]
Bool = Annotated[bool, Field(strict=True)]
Int = Annotated[int, Field(strict=True), BeforeValidator(_whole_number)]
PositiveInt = Annotated[int, Field(strict=True, gt=0), BeforeValidator(_whole_number)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0), BeforeValidator(_whole_number)]
Number = Union[StrictInt, StrictFloat]
StrList = List[Str]


class OneShotModel(BaseModel):
    """Base model with common configuration.

    Attributes are snake_case; the gateway speaks camelCase, which every
    model accepts and emits through its aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a wire-format dictionary.

        Only fields that were explicitly set are included, so an explicit
        ``None`` is kept as ``null`` while an omitted field stays absent.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
