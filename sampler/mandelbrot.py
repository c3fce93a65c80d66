"""PNG images of the Mandelbrot set and other complex functions."""

from __future__ import annotations

import argparse
import cmath
import sys
from typing import Callable

from PIL import Image

Color = tuple[int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024

BLACK: Color = (0, 0, 0)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y)


def _to_uint8(value: float) -> int:
    return int(value) & 0xFF


def _clamp_shift(v: int) -> int:
    if v < 0:
        return 0
    if v > 0xFFFFFF:
        return 255
    return v >> 16


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_clamp_shift(r), _clamp_shift(g), _clamp_shift(b))


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly it escapes under iteration of v*v + z."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def _chroma(v: complex) -> tuple[int, int]:
    blue = (_to_uint8(v.real * 128) + 127) & 0xFF
    red = (_to_uint8(v.imag * 128) + 127) & 0xFF
    return blue, red


def acos(z: complex) -> Color:
    """Colour ``z`` by its complex arc cosine."""
    blue, red = _chroma(cmath.acos(z))
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    """Colour ``z`` by its complex square root."""
    blue, red = _chroma(cmath.sqrt(z))
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Shade ``z`` by how quickly Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        pass
    return BLACK


def render(
    func: Callable[[complex], Color] = mandelbrot,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Image.Image:
    """Render ``func`` over the square from -2-2i to 2+2i as an RGB image."""
    data = bytearray()
    for py in range(height):
        y = py / height * (YMAX - YMIN) + YMIN
        for px in range(width):
            x = px / width * (XMAX - XMIN) + XMIN
            data.extend(func(complex(x, y)))
    return Image.frombytes("RGB", (width, height), bytes(data))


_FUNCTIONS = {"mandelbrot": mandelbrot, "acos": acos, "sqrt": sqrt, "newton": newton}


def main(argv: list[str] | None = None) -> int:
    """Write a PNG rendering to standard output."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Emit a fractal PNG.")
    parser.add_argument("--function", choices=sorted(_FUNCTIONS), default="mandelbrot")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    options = parser.parse_args(argv)
    img = render(_FUNCTIONS[options.function], options.width, options.height)
    img.save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0