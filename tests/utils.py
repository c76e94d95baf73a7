import io
import struct
import zlib

import numpy as np
from PIL import Image

from gui_resources.image import ColorImage, Pixel

RED = Pixel(255, 0, 0, 255)
GREEN = Pixel(0, 255, 0, 255)
BLUE = Pixel(0, 0, 255, 255)
YELLOW = Pixel(255, 255, 0, 255)

QUADRANTS_FILENAME = "_4c_4x4.png"


def quadrant_pixels() -> list[Pixel]:
    """4x4 pixels split into 2x2 quadrants: red/green on top, blue/yellow at the bottom."""
    top = [RED, RED, GREEN, GREEN]
    bottom = [BLUE, BLUE, YELLOW, YELLOW]
    return top + top + bottom + bottom


def quadrant_array() -> np.ndarray:
    return np.array(quadrant_pixels(), dtype=np.uint8).reshape(4, 4, 4)


def quadrant_image() -> ColorImage:
    return ColorImage.from_pixels((4, 4), quadrant_pixels())


def encode_image(array: np.ndarray, image_format: str = "PNG") -> bytes:
    """Encode a (height, width, channels) uint8 array with Pillow."""
    buffer = io.BytesIO()
    Image.fromarray(array).save(buffer, format=image_format)
    return buffer.getvalue()


def write_quadrant_png(output_path) -> None:
    with open(output_path, "wb") as f:
        f.write(encode_image(quadrant_array()))


def random_image(width: int, height: int, seed: int = 0) -> ColorImage:
    rng = np.random.default_rng(seed)
    array = rng.integers(0, 256, (height, width, 4), dtype=np.uint8)
    return ColorImage.from_array(array)


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload)
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def oversized_png(width: int = 30000, height: int = 30000) -> bytes:
    """A well-formed PNG whose header declares a huge RGBA image with almost no pixel data."""
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(b"\x00"))
        + _png_chunk(b"IEND", b"")
    )


def checkerboard_image(width: int, height: int) -> ColorImage:
    """Opaque 1px black and white checkerboard."""
    ys, xs = np.mgrid[0:height, 0:width]
    value = np.where((xs + ys) % 2 == 0, 0, 255).astype(np.uint8)
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[:, :, :3] = value[:, :, None]
    array[:, :, 3] = 255
    return ColorImage.from_array(array)
