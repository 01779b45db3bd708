"""Bind tagged dataclass fields from an argument multimap."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final

from paramscan.errors import CoercionError, ScanError, TargetError

from .coerce import parse_bool, parse_float, parse_int, parse_str, parse_uint
from .fields import DEFAULT_TAG, Kind, describe


if TYPE_CHECKING:
    from paramscan.args import Args

    from .fields import FieldSpec


logger = logging.getLogger(__name__)

_PARSERS: Final[dict[Kind, Callable[[str], Any]]] = {
    Kind.INT: parse_int,
    Kind.UINT: parse_uint,
    Kind.FLOAT: parse_float,
    Kind.BOOL: parse_bool,
    Kind.STR: parse_str,
}


def _check_target(obj: Any) -> None:
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        msg = f"failed to decode form values to struct, received non struct type: {type(obj).__name__}"
        raise TargetError(msg)
    params = getattr(type(obj), "__dataclass_params__", None)
    if params is not None and params.frozen:
        msg = f"cannot scan into frozen dataclass {type(obj).__name__}"
        raise TargetError(msg)


def _coerce(spec: FieldSpec, raw: str) -> Any:
    try:
        return _PARSERS[spec.kind](raw)
    except CoercionError as exc:
        raise ScanError(spec.key, raw, exc.reason) from exc


def _bind_field(args: Args, obj: Any, spec: FieldSpec) -> bool:
    if spec.kind is Kind.BYTES and not spec.is_sequence:
        raw = (args.peek(spec.key) or "").encode()
        setattr(obj, spec.name, bytearray(raw) if spec.raw_type is bytearray else raw)
        # Raw bytes are assigned but not reported as a matched key.
        return False

    if spec.kind not in _PARSERS:
        return False

    if spec.container is not None:
        values = [_coerce(spec, raw) for raw in args.peek_multi(spec.key)]
        setattr(obj, spec.name, spec.container(values))
        return True

    setattr(obj, spec.name, _coerce(spec, args.peek(spec.key) or ""))
    return True


def scan_args(args: Args, obj: Any, field_tag: str = DEFAULT_TAG) -> list[str]:
    """Assign argument values to the tagged fields of a dataclass instance.

    Fields are bound from the key named by their ``field_tag`` metadata
    (``key`` or ``key,modifier``). Sequence fields take every value of the
    key, scalar fields the first one, ``bytes`` fields the raw first value.
    Missing keys leave the field untouched.

    Returns the binding keys that were coerced and assigned, in field order;
    ``bytes`` fields are assigned but not listed. The first
    value that fails to coerce raises ``ScanError``; fields assigned before
    it keep their new values.
    """
    _check_target(obj)

    fields: list[str] = []
    for spec in describe(type(obj), field_tag):
        if not args.has(spec.key):
            continue
        if _bind_field(args, obj, spec):
            fields.append(spec.key)

    logger.debug("scanned %d of %d argument keys into %s", len(fields), len(args), type(obj).__name__)
    return fields
