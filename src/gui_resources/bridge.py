"""
Conversion between flat RGBA8 byte buffers and ColorImage pixel arrays.

The regular path unpacks and packs channel by channel into freshly allocated
arrays, so it does not depend on how numpy lays out ``PIXEL_DTYPE``. The
zero-copy path reinterprets the bytes in place and is only taken when the
layout check below passes at import time.
"""

import numpy as np

from gui_resources import logging
from gui_resources.errors import ShapeMismatchError
from gui_resources.image import (
    BYTES_PER_PIXEL,
    CHANNELS,
    PIXEL_DTYPE,
    ColorImage,
    RawImageBuffer,
)

LOGGER = logging.get_logger(__name__)


def _verify_pixel_layout() -> bool:
    """Checks that PIXEL_DTYPE is four tightly packed bytes in R, G, B, A order."""
    if PIXEL_DTYPE.itemsize != BYTES_PER_PIXEL or PIXEL_DTYPE.names != CHANNELS:
        return False
    offsets = [PIXEL_DTYPE.fields[name][1] for name in CHANNELS]
    return offsets == list(range(BYTES_PER_PIXEL))


PIXEL_LAYOUT_VERIFIED = _verify_pixel_layout()


def check_shape(width: int, height: int, length: int) -> None:
    """Raises ShapeMismatchError unless ``length == width * height * 4``."""
    if width < 0 or height < 0:
        raise ShapeMismatchError(f"Image dimensions must be non-negative, got {width}x{height}")
    expected = width * height * BYTES_PER_PIXEL
    if length != expected:
        raise ShapeMismatchError(
            f"Buffer of {length} bytes does not match {width}x{height} RGBA8 image "
            f"({expected} bytes expected)"
        )


def unpack_pixels(data: bytes, width: int, height: int) -> np.ndarray:
    """Unpacks every 4 consecutive bytes into one pixel, returning a new PIXEL_DTYPE array."""
    check_shape(width, height, len(data))
    num_pixels = width * height
    pixels = np.empty(num_pixels, dtype=PIXEL_DTYPE)
    if num_pixels == 0:
        return pixels

    channels = np.frombuffer(data, dtype=np.uint8).reshape(num_pixels, BYTES_PER_PIXEL)
    for i, name in enumerate(CHANNELS):
        pixels[name] = channels[:, i]
    return pixels


def pack_pixels(pixels: np.ndarray) -> bytes:
    """Packs pixels into a flat R, G, B, A byte string in the same order."""
    channels = np.empty((len(pixels), BYTES_PER_PIXEL), dtype=np.uint8)
    for i, name in enumerate(CHANNELS):
        channels[:, i] = pixels[name]
    return channels.tobytes()


def to_color_image(raw: RawImageBuffer, *, zero_copy: bool = False) -> ColorImage:
    """Converts a decoded RGBA8 buffer into a ColorImage.

    Args:
        raw: Decoded buffer, its length must be exactly ``width * height * 4``.
        zero_copy: Reinterpret the bytes as a read-only pixel view instead of
            copying them. Ignored when the pixel layout could not be verified.

    Returns:
        ColorImage of size ``(raw.width, raw.height)``.

    Raises:
        ShapeMismatchError: If the buffer length disagrees with its dimensions.
    """
    if zero_copy and PIXEL_LAYOUT_VERIFIED:
        check_shape(raw.width, raw.height, len(raw.rgba))
        if raw.width * raw.height == 0:
            pixels = np.empty(0, dtype=PIXEL_DTYPE)
        else:
            # bytes() is a no-op for bytes and detaches mutable buffers
            pixels = np.frombuffer(bytes(raw.rgba), dtype=PIXEL_DTYPE)
            pixels.setflags(write=False)
        return ColorImage((raw.width, raw.height), pixels)

    if zero_copy:
        LOGGER.debug("Pixel layout not verified, falling back to explicit unpack")
    pixels = unpack_pixels(raw.rgba, raw.width, raw.height)
    return ColorImage((raw.width, raw.height), pixels)


def to_raw_buffer(image: ColorImage) -> RawImageBuffer:
    """Converts a ColorImage back into a flat RGBA8 buffer."""
    rgba = pack_pixels(image.pixels)
    check_shape(image.width, image.height, len(rgba))
    return RawImageBuffer(width=image.width, height=image.height, rgba=rgba)


def from_rgba_unmultiplied(size: tuple[int, int], rgba: bytes) -> ColorImage:
    """Builds a ColorImage from unmultiplied RGBA8 bytes of the given (width, height)."""
    width, height = size
    return to_color_image(RawImageBuffer(width=width, height=height, rgba=bytes(rgba)))


def im_flat(raw: RawImageBuffer) -> tuple[bytes, int, int]:
    """Flattens a decoded buffer into the ``(rgba, width, height)`` triple icon APIs take."""
    check_shape(raw.width, raw.height, len(raw.rgba))
    return raw.rgba, raw.width, raw.height
