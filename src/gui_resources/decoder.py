"""
Decoder adapter: encoded image bytes -> RawImageBuffer (RGBA8).

The codec itself is OpenCV by default, Pillow can be selected with
``set_decoder_type("pillow")`` or per call.
"""

import io
from typing import Literal

import cv2  # type: ignore[import-not-found]
import numpy as np
from PIL import Image, UnidentifiedImageError

from gui_resources import logging
from gui_resources.errors import DecodeError
from gui_resources.image import RawImageBuffer

LOGGER = logging.get_logger(__name__)

DecoderType = Literal["opencv", "pillow"]
DECODER_TYPES: tuple[DecoderType, ...] = ("opencv", "pillow")
IMAGE_DECODER_IMP: DecoderType = "opencv"

_BGR_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


def set_decoder_type(decoder_type: DecoderType) -> None:
    """Set the default decoder used by ``decode``.

    Args:
        decoder_type: The codec backend to use. Can be "opencv" or "pillow".
    """
    global IMAGE_DECODER_IMP  # noqa: PLW0603
    IMAGE_DECODER_IMP = _check_decoder_type(decoder_type)


def get_decoder_type() -> DecoderType:
    return IMAGE_DECODER_IMP


def decode(data: bytes, decoder_type: DecoderType | None = None) -> RawImageBuffer:
    """Decodes an encoded image of any supported format into RGBA8.

    Args:
        data: Encoded image bytes (PNG, JPEG, BMP, ...).
        decoder_type: Backend override, defaults to the module-wide setting.

    Returns:
        RawImageBuffer with ``width * height * 4`` bytes.

    Raises:
        DecodeError: If the bytes are not an image the backend can decode.
    """
    backend = IMAGE_DECODER_IMP if decoder_type is None else _check_decoder_type(decoder_type)
    if not data:
        raise DecodeError("Cannot decode an empty byte sequence")

    raw = _decode_opencv(data) if backend == "opencv" else _decode_pillow(data)
    LOGGER.debug("Decoded %d bytes to %dx%d RGBA8 (%s)", len(data), raw.width, raw.height, backend)
    return raw


def _check_decoder_type(decoder_type: str) -> DecoderType:
    if decoder_type not in DECODER_TYPES:
        raise ValueError(f"Unknown decoder type: '{decoder_type}', expected one of {DECODER_TYPES}")
    return decoder_type  # type: ignore[return-value]


def _decode_opencv(data: bytes) -> RawImageBuffer:
    buffer = np.frombuffer(data, dtype=np.uint8)
    try:
        image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED)
    except cv2.error as exc:
        raise DecodeError(f"OpenCV failed to decode image: {exc}") from exc
    if image is None:
        raise DecodeError("OpenCV could not recognize the image data")

    image = _to_uint8(image)
    if image.ndim == 2:
        image = image[:, :, None]
    channels = image.shape[2]
    if channels not in _BGR_TO_RGBA:
        raise DecodeError(f"Unsupported number of channels: {channels}")

    rgba = cv2.cvtColor(image, _BGR_TO_RGBA[channels])
    height, width = rgba.shape[:2]
    return RawImageBuffer(width=width, height=height, rgba=np.ascontiguousarray(rgba).tobytes())


def _to_uint8(image: np.ndarray) -> np.ndarray:
    """Converts 16-bit and floating point samples to 8 bits."""
    if image.dtype == np.uint8:
        return image
    if image.dtype == np.uint16:
        return ((image.astype(np.uint32) + 128) // 257).astype(np.uint8)
    if np.issubdtype(image.dtype, np.floating):
        return np.rint(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)
    raise DecodeError(f"Unsupported sample type: {image.dtype}")


def _decode_pillow(data: bytes) -> RawImageBuffer:
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"Pillow failed to decode image: {exc}") from exc

    width, height = rgba.size
    return RawImageBuffer(width=width, height=height, rgba=rgba.tobytes())
