"""Counting repeated lines and removing duplicate lines."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Iterable, Iterator, TextIO


def _strip_eol(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(stream: Iterable[str], counts: Counter | None = None) -> Counter:
    """Add one to the count of every line read from ``stream`` and return the counts."""
    counts = Counter() if counts is None else counts
    counts.update(_strip_eol(line) for line in stream)
    return counts


def count_file_text(text: str, counts: Counter | None = None) -> Counter:
    """Count the pieces of ``text`` split on newlines, trailing empty piece included."""
    counts = Counter() if counts is None else counts
    counts.update(text.split("\n"))
    return counts


def duplicates(counts: Counter) -> Iterator[tuple[int, str]]:
    """Yield ``(count, line)`` for every line seen more than once."""
    return ((n, line) for line, n in counts.items() if n > 1)


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line the first time it appears."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def _open_each(paths: Iterable[str]) -> Iterator[TextIO]:
    for path in paths:
        try:
            with open(path, encoding="utf-8", newline="") as stream:
                yield stream
        except OSError as err:
            print(f"dup: {err}", file=sys.stderr)


def _streams(paths: list[str]) -> Iterator[Iterable[str]]:
    if paths:
        yield from _open_each(paths)
    else:
        yield sys.stdin


def main(argv: list[str] | None = None) -> int:
    """Report duplicated lines of the named files, or of standard input."""
    parser = argparse.ArgumentParser(prog="dup", description="Report duplicated lines.")
    parser.add_argument("files", nargs="*")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--whole", action="store_true", help="read each named file whole and split on newlines"
    )
    mode.add_argument("--unique", action="store_true", help="print each distinct line once")
    options = parser.parse_args(argv)

    if options.unique:
        lines = (_strip_eol(line) for stream in _streams(options.files) for line in stream)
        for line in dedup(lines):
            print(line)
        return 0

    counts: Counter = Counter()
    if options.whole:
        for stream in _open_each(options.files):
            count_file_text(stream.read(), counts)
    else:
        for stream in _streams(options.files):
            count_lines(stream, counts)

    for n, line in duplicates(counts):
        print(f"{n}\t{line}")
    return 0