"""Read a count and that many integer pairs, and print the GCD of each pair."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from gostudy.basics import gcd


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read ``n`` then ``n`` pairs from ``stdin`` and write one GCD per line.

    Missing numbers are read as zero.
    """
    tokens = iter(stdin.read().split())

    def next_int() -> int:
        return int(next(tokens, "0"))

    count = next_int()
    for _ in range(count):
        a = next_int()
        b = next_int()
        print(gcd(a, b), file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: read from standard input, write to standard output."""
    parser = argparse.ArgumentParser(
        description="Print the greatest common divisor of integer pairs read from stdin."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())