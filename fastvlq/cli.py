"""Command that prints the 64-bit VLQ encoding of a number."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .vu64 import MAX_VALUE, encode_vu64

_NUMBER = re.compile(r"\+?[0-9]+")


def _parse_u64(text: str) -> int | None:
    if not _NUMBER.fullmatch(text):
        return None
    n = int(text)
    return n if n <= MAX_VALUE else None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the encoding of the number given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    n = _parse_u64(args[0]) if args else None
    if n is None:
        print("Usage: <number>", file=sys.stderr)
        return 1
    print(repr(encode_vu64(n)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())