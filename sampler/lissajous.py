"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import io
import math
import random
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO, Iterator

from PIL import Image

PALETTE = [(255, 255, 255), (0, 0, 0)]
WHITE_INDEX = 0
BLACK_INDEX = 1

CYCLES = 5
RES = 0.001
SIZE = 100
NFRAMES = 64
DELAY = 8

ADDRESS = ("localhost", 8000)


def _angles() -> Iterator[float]:
    limit = CYCLES * 2 * math.pi
    t = 0.0
    while t < limit:
        yield t
        t += RES


def frames(rng: random.Random | None = None) -> list[Image.Image]:
    """Return the paletted frames of one animation, drawn with a random frequency ratio."""
    rng = random.Random() if rng is None else rng
    freq = rng.random() * 3.0
    angles = list(_angles())
    xs = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in angles]
    side = 2 * SIZE + 1
    flat_palette = [channel for rgb in PALETTE for channel in rgb]
    images = []
    phase = 0.0
    for _ in range(NFRAMES):
        pixels = bytearray([WHITE_INDEX]) * (side * side)
        for t, px in zip(angles, xs):
            py = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            pixels[py * side + px] = BLACK_INDEX
        img = Image.frombytes("P", (side, side), bytes(pixels))
        img.putpalette(flat_palette)
        images.append(img)
        phase += 0.1
    return images


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to ``out``."""
    images = frames(rng)
    images[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )


class _GifHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        buf = io.BytesIO()
        lissajous(buf)
        body = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main(argv: list[str] | None = None) -> int:
    """Write a GIF to standard output, or serve GIFs over HTTP when given ``web``."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        with ThreadingHTTPServer(ADDRESS, _GifHandler) as server:
            server.serve_forever()
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0