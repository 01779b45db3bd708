"""Interface for ``python -m paramscan``."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING

import msgspec


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .args import Args
from .errors import KeySyntaxError
from .nested import to_json


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> int:
    """Print the merged nested tree of a query string as JSON."""
    parser = ArgumentParser(prog="paramscan")
    _ = parser.add_argument("query", nargs="?", help="query string; read from stdin when omitted")
    _ = parser.add_argument("--pretty", action="store_true", help="indent the JSON output")
    _ = parser.add_argument("--debug", action="store_true", help="log debug records to stderr")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    options = parser.parse_args(args)

    if options.debug:
        logging.basicConfig(level=logging.DEBUG)

    query = options.query if options.query is not None else sys.stdin.read().strip()
    try:
        payload = to_json(Args.parse(query))
    except KeySyntaxError as exc:
        print(f"paramscan: {exc}", file=sys.stderr)
        return 2

    if options.pretty:
        payload = msgspec.json.format(payload, indent=2)
    print(payload.decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())
