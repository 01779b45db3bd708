"""Exception hierarchy for parameter binding."""

from __future__ import annotations


class ParamScanError(Exception):
    """Base class for all binding errors."""


class TargetError(ParamScanError, TypeError):
    """Raised when a scan target cannot receive values."""


class CoercionError(ParamScanError, ValueError):
    """Raised when a raw text value cannot be converted to a field kind."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ScanError(ParamScanError, ValueError):
    """Raised when a tagged field fails to bind from the argument multimap."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"failed to decode `{key}`, got: `{value}` ({reason})")
        self.key = key
        self.value = value
        self.reason = reason


class KeySyntaxError(ParamScanError, ValueError):
    """Raised for bracket keys with unbalanced or misplaced brackets."""

    def __init__(self, key: str) -> None:
        super().__init__(f"malformed bracket key: `{key}`")
        self.key = key


class DecodeError(ParamScanError, ValueError):
    """Raised when a payload cannot be decoded into the requested type."""

    def __init__(self, summary: str, path: str | None = None) -> None:
        message = summary if path is None else f"{summary} - at `{path}`"
        super().__init__(message)
        self.summary = summary
        self.path = path


class MissingParamError(ParamScanError, ValueError):
    """Raised when a required parameter is absent or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing or empty field `{name}`")
        self.name = name
