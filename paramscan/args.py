"""Ordered multimap of request arguments."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import sys
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl


if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override


if TYPE_CHECKING:
    from collections.abc import Iterable


def _to_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode()
    return str(value)


class Args(Mapping[str, list[str]]):
    """Multi-valued string arguments parsed from a query string or form body.

    Every submitted ``(key, value)`` pair is kept in submission order. Distinct
    keys iterate in order of first occurrence and indexing returns all values
    of a key.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] | None = None) -> None:
        super().__init__()
        self._pairs: list[tuple[str, str]] = []
        self._index: dict[str, list[str]] = {}
        for key, value in pairs or ():
            self.add(key, value)

    @classmethod
    def parse(cls, query: str | bytes) -> Args:
        """Parse ``application/x-www-form-urlencoded`` text into arguments.

        Blank values are kept and a bare ``key`` without ``=`` binds the empty
        string, so ``has`` reports every key that was submitted.
        """
        if isinstance(query, bytes):
            query = query.decode("utf-8", errors="replace")
        query = query.removeprefix("?")
        return cls(parse_qsl(query, keep_blank_values=True))

    @classmethod
    def from_mapping(cls, mapping: Any) -> Args:
        """Build arguments from a dict of values or a multidict.

        Objects exposing ``multi_items()`` (Starlette's ``QueryParams`` and
        ``FormData``) keep their pair order. Plain mapping values may be a
        single value or a sequence of values; bytes are decoded and anything
        else is converted with ``str``.
        """
        multi_items = getattr(mapping, "multi_items", None)
        if multi_items is not None:
            return cls((str(key), str(value)) for key, value in multi_items())

        args = cls()
        for key, value in mapping.items():
            items = [value] if isinstance(value, (str, bytes)) else value
            for item in items:
                args.add(str(key), _to_text(item))
        return args

    def add(self, key: str, value: str) -> None:
        """Append a value for key, keeping any earlier values."""
        self._pairs.append((key, value))
        self._index.setdefault(key, []).append(value)

    def has(self, key: str) -> bool:
        """Return True when at least one value was submitted for key."""
        return key in self._index

    def peek(self, key: str) -> str | None:
        """Return the first value for key, or None when key is absent."""
        values = self._index.get(key)
        if not values:
            return None
        return values[0]

    def peek_multi(self, key: str) -> list[str]:
        """Return every value for key in submission order."""
        return list(self._index.get(key, ()))

    def visit_all(self) -> Iterator[tuple[str, str]]:
        """Iterate all submitted pairs in submission order."""
        return iter(list(self._pairs))

    @override
    def __getitem__(self, key: str) -> list[str]:
        if key not in self._index:
            raise KeyError(key)
        return list(self._index[key])

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    @override
    def __len__(self) -> int:
        return len(self._index)

    @override
    def __repr__(self) -> str:
        return f"Args({self._pairs!r})"
