"""Bracket-key tree building, merging and decoding."""

from .keys import parse_scalar, query_to_map, split_key
from .merge import merge
from .unmarshal import to_json, to_tree, unmarshal_args


__all__ = ["merge", "parse_scalar", "query_to_map", "split_key", "to_json", "to_tree", "unmarshal_args"]
