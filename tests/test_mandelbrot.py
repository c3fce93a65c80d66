import pytest

from sampler.mandelbrot import acos, mandelbrot, newton, render, sqrt


def test_origin_never_escapes():
    assert mandelbrot(0) == (0, 0, 0)


def test_immediate_escape_is_white():
    assert mandelbrot(3) == (255, 255, 255)


@pytest.mark.parametrize("z", [1 + 1j, -2 + 1j, 0.5 + 0.5j, -1.8 - 0.1j])
def test_mandelbrot_shades_are_gray(z):
    r, g, b = mandelbrot(z)
    assert r == g == b


@pytest.mark.parametrize("root", [1, -1, 1j, -1j])
def test_newton_roots_converge_at_once(root):
    assert newton(root) == (255, 255, 255)


def test_newton_at_zero_is_black():
    assert newton(0) == (0, 0, 0)


@pytest.mark.parametrize("func", [acos, sqrt])
@pytest.mark.parametrize("z", [0, 1 + 1j, -2 - 2j, 1.5 - 0.25j])
def test_colour_functions_give_bytes(func, z):
    color = func(z)
    assert len(color) == 3
    assert all(isinstance(c, int) and 0 <= c <= 255 for c in color)


def test_render_maps_pixels_to_plane():
    img = render(mandelbrot, 8, 8)
    assert img.size == (8, 8)
    assert img.getpixel((4, 4)) == mandelbrot(0)
    assert img.getpixel((0, 0)) == mandelbrot(complex(-2, -2))
    assert img.getpixel((6, 2)) == mandelbrot(complex(1, -1))


def test_render_other_function():
    img = render(sqrt, 4, 4)
    assert img.getpixel((2, 2)) == sqrt(0)
    assert img.getpixel((1, 3)) == sqrt(complex(-1, 1))