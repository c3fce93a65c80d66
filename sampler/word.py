"""Utilities for word games."""

from __future__ import annotations


def is_byte_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same both ways, comparing raw UTF-8 bytes.

    Only the byte offsets at which a character starts are checked, so text
    with multi-byte characters, case differences or punctuation is not
    recognised.
    """
    data = s.encode("utf-8", errors="surrogatepass")
    last = len(data) - 1
    starts = (i for i, byte in enumerate(data) if byte & 0xC0 != 0x80)
    return all(data[i] == data[last - i] for i in starts)


def _lower(char: str) -> str:
    return char.lower()[0]


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` reads the same both ways, ignoring case and non-letters."""
    letters = [_lower(char) for char in s if char.isalpha()]
    return letters == letters[::-1]