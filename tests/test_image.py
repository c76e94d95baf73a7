import numpy as np
import pytest

from gui_resources.errors import ShapeMismatchError
from gui_resources.image import EXAMPLE_SIZE, PIXEL_DTYPE, ColorImage, Pixel, RawImageBuffer
from tests import utils


def test__color_image__pixel_indexing_is_row_major():
    image = utils.quadrant_image()
    assert image.size == (4, 4)
    assert len(image) == 16
    assert image[0, 0] == utils.RED
    assert image[3, 0] == utils.GREEN
    assert image[0, 3] == utils.BLUE
    assert image[3, 3] == utils.YELLOW
    assert image[2, 1] == tuple(image.pixels[1 * 4 + 2].item())

    with pytest.raises(IndexError):
        _ = image[4, 0]


def test__color_image__length_mismatch_is_rejected():
    pixels = np.zeros(5, dtype=PIXEL_DTYPE)
    with pytest.raises(ShapeMismatchError):
        ColorImage((2, 2), pixels)


def test__color_image__wrong_dtype_is_rejected():
    with pytest.raises(TypeError):
        ColorImage((1, 1), np.zeros(4, dtype=np.uint8))


def test__color_image__new_fills_every_pixel():
    image = ColorImage.new((3, 2), Pixel(1, 2, 3, 4))
    assert image.size == (3, 2)
    assert all(image[x, y] == (1, 2, 3, 4) for x in range(3) for y in range(2))


def test__color_image__array_conversion():
    image = utils.random_image(5, 3)
    array = image.to_array()
    assert array.shape == (3, 5, 4)
    assert array.dtype == np.uint8
    assert tuple(array[2, 4]) == image[4, 2]
    assert ColorImage.from_array(array) == image


def test__color_image__equality():
    assert utils.quadrant_image() == utils.quadrant_image()
    assert utils.quadrant_image() != ColorImage.new((4, 4), utils.RED)
    assert ColorImage.new((2, 3)) != ColorImage.new((3, 2))


def test__color_image__example_is_deterministic():
    example = ColorImage.example()
    assert example.size == EXAMPLE_SIZE
    assert example == ColorImage.example()
    # alpha rises top to bottom, hue changes left to right
    assert example[0, 0].a == 0
    assert example[0, EXAMPLE_SIZE[1] - 1].a > 200
    assert example[0, 10] != example[EXAMPLE_SIZE[0] // 2, 10]


def test__raw_image_buffer__expected_length():
    raw = RawImageBuffer(width=3, height=2, rgba=b"")
    assert raw.expected_length == 24
