"""Counting Unicode characters and the lengths of their UTF-8 encodings."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_rune(char: str) -> str:
    if char in _ESCAPES:
        body = _ESCAPES[char]
    elif char.isprintable():
        body = char
    else:
        code = ord(char)
        if code < 0x20 or code == 0x7F:
            body = f"\\x{code:02x}"
        elif code < 0x10000:
            body = f"\\u{code:04x}"
        else:
            body = f"\\U{code:08x}"
    return f"'{body}'"


def _is_escaped_byte(char: str) -> bool:
    return 0xDC80 <= ord(char) <= 0xDCFF


@dataclass
class CharCounts:
    """Character counts, UTF-8 length counts and the number of invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0

    def report(self) -> str:
        """Return the counts as tab-separated text."""
        parts = ["rune\tcount\n"]
        parts.extend(f"{_quote_rune(c)}\t{n}\n" for c, n in self.counts.items())
        parts.append("\nlen\tcount\n")
        parts.extend(f"{i}\t{n}\n" for i, n in enumerate(self.utflen) if i > 0)
        if self.invalid > 0:
            parts.append(f"\n{self.invalid} invalid UTF-8 characters\n")
        return "".join(parts)


def count_chars(data: bytes | str) -> CharCounts:
    """Count the characters of UTF-8 ``data``; each undecodable byte counts as invalid."""
    if isinstance(data, str):
        data = data.encode("utf-8", errors="surrogatepass")
    result = CharCounts()
    for char in data.decode("utf-8", errors="surrogateescape"):
        if _is_escaped_byte(char):
            result.invalid += 1
            continue
        result.counts[char] += 1
        result.utflen[len(char.encode("utf-8"))] += 1
    return result


def main(argv: list[str] | None = None) -> int:
    """Count the characters of standard input and print the report."""
    argparse.ArgumentParser(prog="charcount", description="Count Unicode characters.").parse_args(
        argv
    )
    print(count_chars(sys.stdin.buffer.read()).report(), end="")
    return 0