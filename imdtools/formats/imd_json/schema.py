from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from marshmallow import EXCLUDE, Schema, fields, post_dump, validate
from marshmallow_dataclass import NewType, class_schema

VERSION = "1.0.0"

# Floats are refused instead of being silently truncated
StrictInt = NewType("StrictInt", int, field=fields.Integer, strict=True)
PositiveInt = NewType(
    "PositiveInt",
    int,
    field=fields.Integer,
    strict=True,
    validate=validate.Range(min=0),
)
StrictlyPositiveInt = NewType(
    "StrictlyPositiveInt",
    int,
    field=fields.Integer,
    strict=True,
    validate=validate.Range(min=0, min_inclusive=False),
)
StrictlyPositiveFloat = NewType(
    "StrictlyPositiveFloat",
    float,
    validate=validate.Range(min=0, min_inclusive=False),
)


@dataclass
class Metadata:
    name: Optional[str] = None
    difficulty: Optional[str] = None
    duration: Optional[PositiveInt] = None  # in ms
    bpm: Optional[StrictlyPositiveFloat] = None
    lanes: Optional[StrictlyPositiveInt] = None


# Ranges of lanes and times, and action types, are not validated here on
# purpose, the chart does it and its errors are more useful


@dataclass
class Chain:
    chain: str = field(metadata={"validate": validate.OneOf(["hold", "slide"])})
    time: StrictInt
    lane: StrictInt
    # hold durations and slide offsets, alternating
    durations: List[StrictInt]


@dataclass
class Single:
    type: str
    time: StrictInt
    lane: StrictInt
    duration: Optional[StrictInt] = None
    offset: Optional[StrictInt] = None


# Chain first otherwise chains get interpreted as single actions
Entry = Union[Chain, Single]


@dataclass
class File:
    version: str
    metadata: Metadata
    actions: List[Entry] = field(default_factory=list)


class BaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    @post_dump
    def remove_none_values(self, data: dict, **kwargs: Any) -> dict:
        return {key: value for key, value in data.items() if value is not None}


FILE_SCHEMA = class_schema(File, base_schema=BaseSchema)()
