"""Small string and integer-sequence helpers, with a growable integer slice."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Iterator, MutableSequence

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _bracketed(values: Iterable[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


class IntSlice:
    """A window of length ``len`` onto a shared backing array of size ``cap``."""

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), cap: int | None = None) -> None:
        items = list(values)
        cap = len(items) if cap is None else cap
        if cap < len(items):
            raise ValueError(f"capacity {cap} is less than length {len(items)}")
        self._array = items + [0] * (cap - len(items))
        self._len = len(items)

    @property
    def cap(self) -> int:
        """Size of the backing array."""
        return len(self._array)

    def resized(self, length: int) -> IntSlice:
        """Return a view of ``length`` elements sharing this slice's backing array."""
        if not 0 <= length <= self.cap:
            raise ValueError(f"slice bounds out of range [:{length}] with capacity {self.cap}")
        view = IntSlice.__new__(IntSlice)
        view._array = self._array
        view._len = length
        return view

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return iter(self._array[: self._len])

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self)[index]
        return self._array[range(self._len)[index]]

    def __setitem__(self, index: int, value: int) -> None:
        self._array[range(self._len)[index]] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (IntSlice, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __str__(self) -> str:
        return _bracketed(self)

    def __repr__(self) -> str:
        return f"IntSlice({list(self)!r}, cap={self.cap})"


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``."""
    s = s[s.rfind("/") + 1 :]
    dot = s.rfind(".")
    return s[:dot] if dot >= 0 else s


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers as ``[1, 2, 3]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in order."""
    return [s for s in strings if s]


def reverse(s: MutableSequence[int]) -> None:
    """Reverse a list in place."""
    s.reverse()


def rotate_left(s: list[int], n: int) -> None:
    """Rotate a list left by ``n`` positions in place, using three reversals."""
    if not 0 <= n <= len(s):
        raise ValueError(f"rotation {n} out of range for length {len(s)}")
    s[:n] = s[:n][::-1]
    s[n:] = s[n:][::-1]
    reverse(s)


def _as_slice(x: IntSlice | Iterable[int] | None) -> IntSlice:
    if isinstance(x, IntSlice):
        return x
    return IntSlice(() if x is None else x)


def append_slice(x: IntSlice | Iterable[int] | None, *args: int) -> IntSlice:
    """Append ``args`` to ``x``, reusing its backing array when it has room.

    When it does not, a new array is allocated with at least double the
    current length, for amortised linear growth.
    """
    x = _as_slice(x)
    zlen = len(x) + len(args)
    if zlen <= x.cap:
        z = x.resized(zlen)
    else:
        z = IntSlice(x, cap=max(zlen, 2 * len(x))).resized(zlen)
    for offset, value in enumerate(args, start=len(x)):
        z[offset] = value
    return z


def append_int(x: IntSlice | Iterable[int] | None, y: int) -> IntSlice:
    """Append a single integer to ``x``."""
    return append_slice(x, y)


def _growth() -> None:
    x = IntSlice()
    for i in range(10):
        y = append_int(x, i)
        print(f"{i}  cap={y.cap}\t{y}")
        x = y


def _reverse_interactive(stream: Iterable[str]) -> None:
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_bracketed(a))
    s = [0, 1, 2, 3, 4, 5]
    rotate_left(s, 2)
    print(_bracketed(s))
    for line in stream:
        fields = line.split()
        bad = next((f for f in fields if not _INTEGER.fullmatch(f)), None)
        if bad is not None:
            print(f"invalid integer: {bad!r}", file=sys.stderr)
            continue
        ints = [int(f) for f in fields]
        reverse(ints)
        print(_bracketed(ints))


def main(argv: list[str] | None = None) -> int:
    """Run one of the small text and slice demonstrations."""
    parser = argparse.ArgumentParser(prog="textutil")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("basename", help="print the base name of each input line")
    comma_parser = commands.add_parser("comma", help="insert thousands separators")
    comma_parser.add_argument("numbers", nargs="*")
    commands.add_parser("ints", help="format a sample list of integers")
    commands.add_parser("growth", help="show slice capacity growth")
    commands.add_parser("reverse", help="reverse integers read from each input line")
    options = parser.parse_args(argv)

    if options.command == "basename":
        for line in sys.stdin:
            print(basename(line.rstrip("\r\n")))
    elif options.command == "comma":
        for number in options.numbers:
            print(f"  {comma(number)}")
    elif options.command == "ints":
        print(ints_to_string([1, 2, 3]))
    elif options.command == "growth":
        _growth()
    else:
        _reverse_interactive(sys.stdin)
    return 0