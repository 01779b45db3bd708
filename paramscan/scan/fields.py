"""Field descriptor tables for tagged dataclasses."""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import functools
import types
import typing
from typing import Any, Final, NewType


UInt = NewType("UInt", int)
"""Annotation for fields that only accept unsigned integers."""

DEFAULT_TAG: Final = "url"
IGNORE_TAG: Final = "-"

_LIST_ORIGINS: Final = frozenset({list, collections.abc.Sequence, collections.abc.MutableSequence})


class Kind(enum.Enum):
    """Scalar kinds a raw argument can be coerced into."""

    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"
    BYTES = "bytes"
    UNSUPPORTED = "unsupported"


_SCALAR_KINDS: Final[dict[Any, Kind]] = {
    int: Kind.INT,
    UInt: Kind.UINT,
    float: Kind.FLOAT,
    bool: Kind.BOOL,
    str: Kind.STR,
    bytes: Kind.BYTES,
    bytearray: Kind.BYTES,
}


@dataclasses.dataclass(frozen=True, slots=True)
class FieldSpec:
    """Binding metadata for one tagged dataclass field.

    ``kind`` is the element kind when ``container`` is set.
    """

    name: str
    key: str
    modifier: str
    kind: Kind
    container: type[list[Any]] | type[tuple[Any, ...]] | None = None
    raw_type: Any = None

    @property
    def is_sequence(self) -> bool:
        return self.container is not None


def split_tag(tag: str) -> tuple[str, str]:
    """Split ``key[,modifier]`` into its key and modifier parts."""
    key, _, modifier = tag.partition(",")
    return key, modifier


def _unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return tp


def classify(tp: Any) -> tuple[Kind, type[list[Any]] | type[tuple[Any, ...]] | None]:
    """Return the scalar kind and sequence container for an annotation."""
    tp = _unwrap_optional(tp)
    if tp in _SCALAR_KINDS:
        return _SCALAR_KINDS[tp], None

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _LIST_ORIGINS and len(args) == 1:
        return _SCALAR_KINDS.get(_unwrap_optional(args[0]), Kind.UNSUPPORTED), list
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return _SCALAR_KINDS.get(_unwrap_optional(args[0]), Kind.UNSUPPORTED), tuple
    return Kind.UNSUPPORTED, None


@functools.cache
def describe(cls: type, field_tag: str = DEFAULT_TAG) -> tuple[FieldSpec, ...]:
    """Build the descriptor table of fields tagged under ``field_tag``.

    Fields without a tag in that namespace, or tagged with ``"-"``, are left
    out. The table is computed once per class and namespace.
    """
    hints = typing.get_type_hints(cls)
    specs: list[FieldSpec] = []
    for field in dataclasses.fields(cls):
        tag = field.metadata.get(field_tag)
        if not tag or tag == IGNORE_TAG:
            continue
        key, modifier = split_tag(tag)
        if not key:
            continue
        raw_type = hints.get(field.name, field.type)
        kind, container = classify(raw_type)
        specs.append(
            FieldSpec(
                name=field.name,
                key=key,
                modifier=modifier,
                kind=kind,
                container=container,
                raw_type=_unwrap_optional(raw_type),
            )
        )
    return tuple(specs)
