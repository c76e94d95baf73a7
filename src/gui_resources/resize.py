"""
Fill resizing: crop a ColorImage to the target aspect ratio, then scale it.

Scaling resamples every channel on its own, so alpha never weights the color
channels and the result stays unmultiplied.
"""

import enum

import cv2  # type: ignore[import-not-found]
import numpy as np
from PIL import Image

from gui_resources import logging
from gui_resources.errors import DegenerateSourceError
from gui_resources.image import PIXEL_DTYPE, ColorImage

LOGGER = logging.get_logger(__name__)

GAUSSIAN_SIGMA = 0.5


class FilterKind(enum.Enum):
    """Sampling filter used when scaling the cropped image."""

    NEAREST_NEIGHBOR = "nearest_neighbor"
    LINEAR = "linear"
    CUBIC = "cubic"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"


_RESAMPLE = {
    FilterKind.NEAREST_NEIGHBOR: Image.Resampling.NEAREST,
    FilterKind.LINEAR: Image.Resampling.BILINEAR,
    FilterKind.CUBIC: Image.Resampling.BICUBIC,
    FilterKind.LANCZOS3: Image.Resampling.LANCZOS,
}


def fill_crop_box(
    source_size: tuple[int, int], target: tuple[int, int]
) -> tuple[int, int, int, int]:
    """Computes the centered crop of the source that matches the target aspect ratio.

    Args:
        source_size: (width, height) of the source, both positive.
        target: (width, height) of the target, both positive.

    Returns:
        (x, y, width, height) of the crop rectangle inside the source.
    """
    src_w, src_h = source_size
    dst_w, dst_h = target

    # src_w / src_h > dst_w / dst_h, compared without floats
    if src_w * dst_h > dst_w * src_h:
        crop_w = (src_h * dst_w + dst_h // 2) // dst_h
        crop_w = min(max(crop_w, 1), src_w)
        return (src_w - crop_w) // 2, 0, crop_w, src_h

    crop_h = (src_w * dst_h + dst_w // 2) // dst_w
    crop_h = min(max(crop_h, 1), src_h)
    return 0, (src_h - crop_h) // 2, src_w, crop_h


def resize_to_fill(
    source: ColorImage, target: tuple[int, int], filter: FilterKind
) -> ColorImage:
    """Resizes ``source`` to exactly ``target`` without letterboxing or stretching.

    The source is first cropped (centered) to the target aspect ratio, then the
    crop is scaled to the target size with the selected filter.

    Raises:
        DegenerateSourceError: If the source has no pixels but the target does.
        ValueError: If a target dimension is negative.
        TypeError: If ``filter`` is not a FilterKind.
    """
    if not isinstance(filter, FilterKind):
        raise TypeError(f"filter must be a FilterKind, got {filter!r}")
    width, height = target
    if width < 0 or height < 0:
        raise ValueError(f"Target size must be non-negative, got {target}")
    if width == 0 or height == 0:
        return ColorImage((width, height), np.empty(0, dtype=PIXEL_DTYPE))
    if source.width == 0 or source.height == 0:
        raise DegenerateSourceError(
            f"Cannot fill {width}x{height} from an empty source of size {source.size}"
        )

    x, y, crop_w, crop_h = fill_crop_box(source.size, (width, height))
    cropped = source.to_array()[y : y + crop_h, x : x + crop_w]
    LOGGER.debug(
        "Fill resize %s -> %s, crop=(%d, %d, %d, %d), filter=%s",
        source.size, target, x, y, crop_w, crop_h, filter.name,
    )

    if (crop_w, crop_h) == (width, height):
        return ColorImage.from_array(np.ascontiguousarray(cropped))
    return ColorImage.from_array(_scale(np.ascontiguousarray(cropped), width, height, filter))


def _scale(array: np.ndarray, width: int, height: int, filter: FilterKind) -> np.ndarray:
    """Scales a (height, width, 4) uint8 array to the given size."""
    if filter is FilterKind.GAUSSIAN:
        sigma_x = max(array.shape[1] / width, 1.0) * GAUSSIAN_SIGMA
        sigma_y = max(array.shape[0] / height, 1.0) * GAUSSIAN_SIGMA
        blurred = cv2.GaussianBlur(
            array, (0, 0), sigmaX=sigma_x, sigmaY=sigma_y, borderType=cv2.BORDER_REPLICATE
        )
        resized = cv2.resize(blurred, (width, height), interpolation=cv2.INTER_LINEAR)
        return resized.reshape(height, width, -1)

    resample = _RESAMPLE[filter]
    bands = [
        Image.fromarray(np.ascontiguousarray(array[:, :, i])).resize((width, height), resample)
        for i in range(array.shape[2])
    ]
    return np.stack([np.asarray(band) for band in bands], axis=-1)
