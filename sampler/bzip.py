"""A writer that compresses what is written to it with bzip2."""

from __future__ import annotations

import bz2
import shutil
import sys
from typing import BinaryIO

BLOCK_SIZE = 9


class Writer:
    """Compresses data written to it and passes the result to an underlying stream.

    Closing flushes the compressed stream but leaves the underlying stream open.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        """Whether the writer has been closed."""
        return self._compressor is None

    def _live(self) -> bz2.BZ2Compressor:
        if self._compressor is None:
            raise ValueError("closed")
        return self._compressor

    def write(self, data: bytes) -> int:
        """Compress ``data``; return the number of uncompressed bytes taken."""
        chunk = self._live().compress(bytes(data))
        if chunk:
            self._out.write(chunk)
        return len(data)

    def close(self) -> None:
        """Flush the compressed data and end the stream."""
        compressor = self._live()
        try:
            tail = compressor.flush()
            if tail:
                self._out.write(tail)
        finally:
            self._compressor = None

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.closed:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    out = sys.stdout.buffer
    try:
        writer = Writer(out)
        shutil.copyfileobj(sys.stdin.buffer, writer)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        writer.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    out.flush()
    return 0