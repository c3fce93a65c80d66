"""Converting PNG (or JPEG) images to JPEG."""

from __future__ import annotations

import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

QUALITY = 95
_DECODERS = ["PNG", "JPEG"]


def _flatten(img: Image.Image) -> Image.Image:
    if img.mode in ("L", "RGB"):
        return img
    if img.mode == "1":
        return img.convert("L")
    rgba = img.convert("RGBA")
    flat = Image.new("RGB", rgba.size, (0, 0, 0))
    flat.paste(rgba, mask=rgba.getchannel("A"))
    return flat


def to_jpeg(inp: BinaryIO, out: BinaryIO) -> str:
    """Decode an image from ``inp`` and write it to ``out`` as JPEG; return the input format."""
    try:
        img = Image.open(inp, formats=_DECODERS)
        img.load()
    except UnidentifiedImageError as err:
        raise ValueError("image: unknown format") from err
    except OSError as err:
        raise ValueError(f"image: {err}") from err
    kind = img.format.lower()
    print(f"Input format = {kind}", file=sys.stderr)
    _flatten(img).save(out, format="JPEG", quality=QUALITY)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Convert the image on standard input to JPEG on standard output."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except ValueError as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0