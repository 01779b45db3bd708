"""Merging of nested trees built from individual bracket keys."""

from __future__ import annotations

from typing import Any


def _merge_dict(left: dict[str, Any], right: dict[str, Any]) -> dict[str, Any]:
    merged = dict(left)
    for key, value in right.items():
        if key in merged:
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge(left: Any, right: Any) -> Any:
    """Merge ``right`` into ``left`` and return the result as a new tree.

    Dicts merge key by key and lists concatenate. For any other pairing,
    including a dict meeting a list, ``right`` replaces ``left``.
    """
    if isinstance(left, dict) and isinstance(right, dict):
        return _merge_dict(left, right)
    if isinstance(left, list) and isinstance(right, list):
        return [*left, *right]
    return right
