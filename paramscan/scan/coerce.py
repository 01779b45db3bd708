"""Conversion of raw argument text into scalar field kinds."""

from __future__ import annotations

import math
import re
from typing import Final

from paramscan.errors import CoercionError


_INT_RE: Final = re.compile(r"[+-]?[0-9]+")
_UINT_RE: Final = re.compile(r"[0-9]+")
_DECIMAL_RE: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1
UINT64_MAX: Final = 2**64 - 1

_TRUE: Final = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE: Final = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Longest significant digit run that can still fit in 64 bits.
_MAX_DIGITS: Final = 20


def _significant_digits(raw: str) -> int:
    return len(raw.lstrip("+-").lstrip("0"))


def parse_int(raw: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    msg = "expected int"
    if _INT_RE.fullmatch(raw) is None or _significant_digits(raw) > _MAX_DIGITS:
        raise CoercionError(msg)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise CoercionError(msg)
    return value


def parse_uint(raw: str) -> int:
    """Parse a base-10 unsigned 64-bit integer. Signs are not accepted."""
    msg = "expected unsigned int"
    if _UINT_RE.fullmatch(raw) is None or _significant_digits(raw) > _MAX_DIGITS:
        raise CoercionError(msg)
    value = int(raw)
    if value > UINT64_MAX:
        raise CoercionError(msg)
    return value


def parse_float(raw: str) -> float:
    """Parse a finite decimal number.

    NaN and infinities are rejected however they are spelled, as are literals
    that overflow to infinity.
    """
    msg = "expected decimal"
    if _DECIMAL_RE.fullmatch(raw) is None:
        raise CoercionError(msg)
    value = float(raw)
    if math.isnan(value) or math.isinf(value):
        raise CoercionError(msg)
    return value


def parse_bool(raw: str) -> bool:
    """Parse one of the conventional boolean literals."""
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    msg = "expected boolean"
    raise CoercionError(msg)


def parse_str(raw: str) -> str:
    return raw
