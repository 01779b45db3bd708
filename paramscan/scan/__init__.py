"""Flat tag scanning of argument multimaps into dataclass fields."""

from .fields import DEFAULT_TAG, IGNORE_TAG, FieldSpec, Kind, UInt, describe
from .scanner import scan_args


__all__ = ["DEFAULT_TAG", "IGNORE_TAG", "FieldSpec", "Kind", "UInt", "describe", "scan_args"]
