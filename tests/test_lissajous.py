import io
import random

import pytest
from PIL import Image

from sampler.lissajous import (
    BLACK_INDEX,
    DELAY,
    NFRAMES,
    SIZE,
    WHITE_INDEX,
    frames,
    lissajous,
)


@pytest.fixture(scope="module")
def images():
    return frames(random.Random(7))


def test_frame_count_and_size(images):
    assert len(images) == NFRAMES
    assert all(img.size == (2 * SIZE + 1, 2 * SIZE + 1) for img in images)


def test_frames_use_only_the_two_palette_entries(images):
    for img in images:
        assert set(img.getdata()) == {WHITE_INDEX, BLACK_INDEX}


def test_palette_is_white_then_black(images):
    assert images[0].getpalette()[:6] == [255, 255, 255, 0, 0, 0]


def test_first_point_of_first_frame_is_the_centre(images):
    assert images[0].getpixel((SIZE, SIZE)) == BLACK_INDEX
    assert images[0].getpixel((0, 0)) == WHITE_INDEX


def test_gif_round_trip(images):
    buf = io.BytesIO()
    lissajous(buf, random.Random(7))
    data = buf.getvalue()
    assert data[:6] == b"GIF89a"
    with Image.open(io.BytesIO(data)) as gif:
        assert gif.n_frames == NFRAMES
        assert gif.info["loop"] == NFRAMES
        assert gif.info["duration"] == DELAY * 10
        for index in (0, NFRAMES - 1):
            gif.seek(index)
            got = list(gif.convert("RGB").getdata())
            assert got == list(images[index].convert("RGB").getdata())