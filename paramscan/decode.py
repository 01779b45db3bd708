"""Request body decoding and required parameter checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import msgspec

from paramscan.args import Args
from paramscan.errors import DecodeError, MissingParamError, ScanError, TargetError
from paramscan.nested.unmarshal import decode_error
from paramscan.scan import DEFAULT_TAG, scan_args


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T")


def decode(
    target: T | type[T],
    body: bytes | str,
    content_type: str,
    *,
    tag: str = DEFAULT_TAG,
    strict: bool = True,
) -> T:
    """Decode a request body according to its content type.

    JSON bodies are decoded with msgspec into the type of ``target`` and the
    new value is returned. Any other body is parsed as a urlencoded form and
    scanned into ``target`` through its ``tag`` field metadata; when
    ``target`` is a class it is instantiated with its defaults first.
    """
    target_type: Any = target if isinstance(target, type) else type(target)

    if JSON_CONTENT_TYPE in content_type.lower():
        logger.debug("decoding JSON body into %s", target_type.__name__)
        try:
            return msgspec.json.decode(body, type=target_type, strict=strict)
        except msgspec.DecodeError as exc:
            error = decode_error(exc)
            raise DecodeError(f"error decoding request: {error.summary}", error.path) from exc

    if isinstance(target, type):
        try:
            obj: Any = target()
        except TypeError as exc:
            msg = f"cannot instantiate {target.__name__} without arguments"
            raise TargetError(msg) from exc
    else:
        obj = target

    logger.debug("decoding form body into %s", target_type.__name__)
    try:
        _ = scan_args(Args.parse(body), obj, tag)
    except ScanError as exc:
        msg = f"error decoding request: {exc}"
        raise DecodeError(msg) from exc
    return obj


def missing_params(fields: Iterable[str], *sources: Args) -> list[str]:
    """Return the fields that are absent or empty in every source."""
    return [name for name in fields if not any(source.peek(name) for source in sources)]


def require_params(fields: Iterable[str], *sources: Args) -> None:
    """Raise ``MissingParamError`` for the first absent or empty field."""
    missing = missing_params(fields, *sources)
    if missing:
        raise MissingParamError(missing[0])
