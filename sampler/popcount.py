"""Population count of 64-bit unsigned integers."""

from __future__ import annotations


def _table() -> bytes:
    pc = bytearray(256)
    for i in range(1, 256):
        pc[i] = pc[i // 2] + (i & 1)
    return bytes(pc)


_PC = _table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit unsigned integer ``x``."""
    if not 0 <= x < 1 << 64:
        raise ValueError(f"{x} is not a 64-bit unsigned integer")
    return sum(_PC[b] for b in x.to_bytes(8, "little"))