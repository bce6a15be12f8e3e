"""Reverse text character by character."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print it reversed."""
    parser = argparse.ArgumentParser(
        description="Print the first line of standard input reversed."
    )
    parser.parse_args(argv)

    line = sys.stdin.readline()
    if not line:
        return 0
    line = line.removesuffix("\n").removesuffix("\r")
    print(reverse_string(line))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())