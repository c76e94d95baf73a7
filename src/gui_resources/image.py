"""
Pixel and image value types shared by the decoder, the bridge and the resizer.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

import cv2  # type: ignore[import-not-found]
import numpy as np

from gui_resources.errors import ShapeMismatchError

BYTES_PER_PIXEL = 4
CHANNELS = ("r", "g", "b", "a")
PIXEL_DTYPE = np.dtype([(name, np.uint8) for name in CHANNELS])

EXAMPLE_SIZE = (128, 64)


class Pixel(NamedTuple):
    """A single unmultiplied RGBA8 color."""

    r: int
    g: int
    b: int
    a: int = 255


class ColorImage:
    """
    An image of unmultiplied RGBA8 pixels stored in row-major order.

    ``pixels`` is a one-dimensional ``PIXEL_DTYPE`` array and the pixel at
    ``(x, y)`` lives at index ``y * width + x``.
    """

    __slots__ = ("pixels", "size")

    def __init__(self, size: tuple[int, int], pixels: np.ndarray):
        width, height = size
        if width < 0 or height < 0:
            raise ShapeMismatchError(f"Image size must be non-negative, got {size}")
        if not isinstance(pixels, np.ndarray) or pixels.dtype != PIXEL_DTYPE:
            raise TypeError("pixels must be a numpy array with PIXEL_DTYPE")
        if pixels.ndim != 1 or len(pixels) != width * height:
            raise ShapeMismatchError(
                f"Image of size {width}x{height} needs {width * height} pixels, "
                f"got array of shape {pixels.shape}"
            )
        self.size = (int(width), int(height))
        self.pixels = pixels

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @classmethod
    def new(cls, size: tuple[int, int], color: Iterable[int] = Pixel(0, 0, 0, 0)) -> "ColorImage":
        """Creates an image of the given size filled with a single color."""
        width, height = size
        pixels = np.empty(width * height, dtype=PIXEL_DTYPE)
        pixels[:] = tuple(color)
        return cls(size, pixels)

    @classmethod
    def from_pixels(cls, size: tuple[int, int], pixels: Iterable[Iterable[int]]) -> "ColorImage":
        """Creates an image from an iterable of (r, g, b, a) values in row-major order."""
        return cls(size, np.array([tuple(pixel) for pixel in pixels], dtype=PIXEL_DTYPE))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ColorImage":
        """Creates an image from a (height, width, 4) uint8 array, copying channel by channel."""
        if array.ndim != 3 or array.shape[2] != BYTES_PER_PIXEL or array.dtype != np.uint8:
            raise ShapeMismatchError(
                f"Expected a (height, width, 4) uint8 array, got {array.shape} {array.dtype}"
            )
        height, width, _ = array.shape
        pixels = np.empty(width * height, dtype=PIXEL_DTYPE)
        for i, name in enumerate(CHANNELS):
            pixels[name] = array[:, :, i].reshape(-1)
        return cls((width, height), pixels)

    def to_array(self) -> np.ndarray:
        """Returns the pixels as a new (height, width, 4) uint8 array."""
        channels = [self.pixels[name] for name in CHANNELS]
        return np.stack(channels, axis=-1).reshape(self.height, self.width, BYTES_PER_PIXEL)

    @classmethod
    def example(cls) -> "ColorImage":
        """
        The built-in placeholder pattern.

        Hue sweeps from left to right at full saturation and value, alpha rises
        from transparent at the top row towards opaque at the bottom.
        """
        width, height = EXAMPLE_SIZE
        hue = (np.arange(width, dtype=np.uint32) * 256 // width).astype(np.uint8)
        hsv = np.empty((height, width, 3), dtype=np.uint8)
        hsv[:, :, 0] = hue[None, :]
        hsv[:, :, 1:] = 255
        rgb = cv2.cvtColor(hsv, cv2.COLOR_HSV2RGB_FULL)

        alpha = (np.arange(height, dtype=np.uint32) * 255 // height).astype(np.uint8)
        rgba = np.empty((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        rgba[:, :, :3] = rgb
        rgba[:, :, 3] = alpha[:, None]
        return cls.from_array(rgba)

    def __getitem__(self, xy: tuple[int, int]) -> Pixel:
        x, y = xy
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel {xy} is outside of image of size {self.size}")
        return Pixel(*(int(v) for v in self.pixels[y * self.width + x].item()))

    def __len__(self) -> int:
        return len(self.pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorImage):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColorImage(size={self.size}, pixels={len(self.pixels)})"


@dataclass(frozen=True)
class RawImageBuffer:
    """Decoder output: a flat row-major RGBA8 byte buffer tagged with its dimensions."""

    width: int
    height: int
    rgba: bytes

    @property
    def expected_length(self) -> int:
        return self.width * self.height * BYTES_PER_PIXEL


@dataclass(frozen=True)
class IconData:
    """Window icon pixels in the layout windowing-system icon APIs expect."""

    rgba: bytes
    width: int
    height: int
