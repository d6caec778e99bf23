from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union


@dataclass(frozen=True)
class AttrString:
    value: str


@dataclass(frozen=True)
class AttrInt:
    value: int


@dataclass(frozen=True)
class AttrFloat:
    value: float


@dataclass(frozen=True)
class AttrBool:
    value: bool


@dataclass(frozen=True)
class AttrRecord:
    """A nested record; its payload is itself a TypedRecord."""

    attrs: Tuple["Attr", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'attrs', tuple(self.attrs))


@dataclass(frozen=True)
class AttrList:
    """A sequence of values. Decoders only build single-typed lists."""

    items: Tuple["AttrValue", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'items', tuple(self.items))


AttrValue = Union[AttrString, AttrInt, AttrFloat, AttrBool, AttrRecord, AttrList]


class Attr(NamedTuple):
    """A single (key, value) pair within a record.

    Keys must not contain '.' to be reachable through a dot-path lookup.
    """

    key: str
    value: AttrValue


# Ordered, insertion-order sequence of attributes. Keys are expected to be
# unique but lookups simply return the first match.
TypedRecord = Tuple[Attr, ...]
