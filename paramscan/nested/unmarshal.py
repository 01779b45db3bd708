"""Decode bracket-keyed arguments into arbitrary types via a JSON tree."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, TypeVar

import msgspec

from paramscan.errors import DecodeError

from .keys import query_to_map
from .merge import merge


if TYPE_CHECKING:
    from paramscan.args import Args


logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_ENCODER: Final = msgspec.json.Encoder()

_VALIDATION_RE: Final = re.compile(r"^(?P<summary>.*?)(?:\s+-\s+at\s+`(?P<path>[^`]+)`)?$", re.DOTALL)


def to_tree(args: Args) -> dict[str, Any]:
    """Merge every argument pair into one nested tree.

    Pairs are folded in submission order, so when two keys collide on values
    that cannot be merged the one submitted last wins. For example
    ``cat=1&bar[one][two]=2&bar[one][red]=112`` becomes
    ``{"cat": 1, "bar": {"one": {"two": 2, "red": 112}}}``.
    """
    builder: dict[str, Any] = {}
    for key, value in args.visit_all():
        builder = merge(builder, query_to_map(key, value))
    return builder


def to_json(args: Args, json_encoder: Callable[[Any], bytes] = JSON_ENCODER.encode) -> bytes:
    """Serialize the merged tree of ``args`` to JSON bytes."""
    return json_encoder(to_tree(args))


@functools.cache
def _decoder(target_type: Any, strict: bool) -> msgspec.json.Decoder[Any]:
    return msgspec.json.Decoder(type=target_type, strict=strict)


def decode_error(exc: msgspec.DecodeError) -> DecodeError:
    """Convert a msgspec error into a ``DecodeError`` with summary and path."""
    message = str(exc).strip()
    match = _VALIDATION_RE.match(message)
    if match is None:
        return DecodeError(message)
    return DecodeError(match.group("summary").strip() or message, match.group("path"))


def unmarshal_args(args: Args, target_type: type[T], *, strict: bool = True) -> T:
    """Decode bracket-keyed arguments into ``target_type``.

    Tree keys are matched to field names (or their msgspec ``rename``) of
    dataclasses, ``msgspec.Struct`` types, ``TypedDict`` and the like,
    recursively. With ``strict=False`` msgspec also converts numeric and
    boolean strings into the declared field types.
    """
    payload = to_json(args)
    logger.debug("decoding %d bytes of nested arguments into %r", len(payload), target_type)
    try:
        return _decoder(target_type, strict).decode(payload)
    except msgspec.DecodeError as exc:
        raise decode_error(exc) from exc
