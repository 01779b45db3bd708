"""Bracket key decomposition into nested single-value trees."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Final

from paramscan.errors import KeySyntaxError


_KEY_RE: Final = re.compile(r"[^\[\]]+(?:\[[^\[\]]*\])*")
_SEGMENT_RE: Final = re.compile(r"\[([^\[\]]*)\]")
_NUMBER_RE: Final = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_LITERALS: Final[dict[str, Any]] = {"true": True, "false": False, "null": None}

_INT_MIN: Final = -(2**63)
_UINT_MAX: Final = 2**64 - 1


def split_key(raw_key: str) -> list[str]:
    """Split ``name[a][b][]`` into ``["name", "a", "b", ""]``.

    The top-level name must be non-empty and every bracket must be closed
    before the next one opens. Anything else raises ``KeySyntaxError``.
    """
    if _KEY_RE.fullmatch(raw_key) is None:
        raise KeySyntaxError(raw_key)
    name_end = raw_key.find("[")
    if name_end == -1:
        return [raw_key]
    return [raw_key[:name_end], *_SEGMENT_RE.findall(raw_key, name_end)]


def parse_scalar(raw_value: str) -> Any:
    """Interpret a value as a JSON number, boolean or null, else keep the text."""
    if raw_value in _LITERALS:
        return _LITERALS[raw_value]
    if _NUMBER_RE.fullmatch(raw_value) is None:
        return raw_value

    try:
        value = json.loads(raw_value)
    except ValueError:
        # Integer literals past the interpreter's digit limit.
        return raw_value
    if isinstance(value, int) and not _INT_MIN <= value <= _UINT_MAX:
        value = float(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return raw_value
        if value.is_integer() and _INT_MIN <= value <= _UINT_MAX:
            return int(value)
    return value


def _build(segments: list[str], raw_value: str) -> dict[str, Any]:
    if len(segments) == 1:
        return {segments[0]: parse_scalar(raw_value)}

    child: Any = _build(segments[1:], raw_value)
    # `[]` marks a collection: the child is keyed by "" and becomes one list item.
    if segments[1] == "":
        child = [child[""]]
    return {segments[0]: child}


def query_to_map(raw_key: str, raw_value: str) -> dict[str, Any]:
    """Turn one pair such as ``a[b][c]=4`` into ``{"a": {"b": {"c": 4}}}``."""
    return _build(split_key(raw_key), raw_value)
