from importlib import metadata

from gui_resources.bridge import from_rgba_unmultiplied, im_flat, to_color_image, to_raw_buffer
from gui_resources.decoder import decode, set_decoder_type
from gui_resources.errors import DecodeError, DegenerateSourceError, ShapeMismatchError
from gui_resources.fonts import FontData, FontDefinitions, FontFamily
from gui_resources.image import ColorImage, IconData, Pixel, RawImageBuffer
from gui_resources.resize import FilterKind, resize_to_fill
from gui_resources.resources import PathPolicy, ResourceConfig, ResourceLoader

__all__ = [
    "ColorImage",
    "DecodeError",
    "DegenerateSourceError",
    "FilterKind",
    "FontData",
    "FontDefinitions",
    "FontFamily",
    "IconData",
    "PathPolicy",
    "Pixel",
    "RawImageBuffer",
    "ResourceConfig",
    "ResourceLoader",
    "ShapeMismatchError",
    "decode",
    "from_rgba_unmultiplied",
    "im_flat",
    "resize_to_fill",
    "set_decoder_type",
    "to_color_image",
    "to_raw_buffer",
]

__version__ = metadata.version(__package__ or __name__)
