"""Printing command-line arguments, in several small variations."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

GREETING = "Hello, 世界"


def echo(newline: bool, sep: str, args: Iterable[str], out: TextIO | None = None) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, optionally followed by a newline."""
    out = sys.stdout if out is None else out
    out.write(sep.join(args))
    if newline:
        out.write("\n")


def join_args(args: Iterable[str]) -> str:
    """Join arguments with single spaces."""
    return " ".join(args)


def indexed_args(args: Iterable[str]) -> list[str]:
    """Describe each argument together with its position."""
    return [f"Arg: {arg} Index: {index}" for index, arg in enumerate(args)]


def hello() -> str:
    """Return the classic greeting."""
    return GREETING


def main(argv: list[str] | None = None) -> int:
    """Print the arguments, honouring ``-n`` and ``-s`` like the echo command."""
    parser = argparse.ArgumentParser(prog="echo", description="Print arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    options = parser.parse_args(argv)
    echo(not options.n, options.s, options.args)
    return 0