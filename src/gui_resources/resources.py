"""
ResourceLoader: resolves resource files and turns them into GUI-ready values.

Image and icon loading are fail-soft: an unreadable or undecodable image is
replaced with ``ColorImage.example()``, an unreadable or undecodable icon
becomes ``None``. Set ``ResourceConfig(strict=True)`` to raise instead.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from gui_resources import bridge, decoder, logging
from gui_resources import filesystem as fs
from gui_resources.errors import DecodeError
from gui_resources.fonts import FamilyKey, FontData, FontDefinitions
from gui_resources.image import ColorImage, IconData
from gui_resources.resize import FilterKind, resize_to_fill

LOGGER = logging.get_logger(__name__)
DEFAULT_BASE_DIR = "./resources"


class PathPolicy(enum.Enum):
    """How a resource filename is turned into a path."""

    BASE_DIR = "base_dir"
    AS_GIVEN = "as_given"


@dataclass(frozen=True)
class ResourceConfig:
    """
    Settings shared by every lookup of a ResourceLoader.

    Attributes:
        base_dir: Directory (local or ``gs://``) that ``PathPolicy.BASE_DIR`` resolves against.
        filter: Filter used by ``load_image`` when a size is requested.
        strict: Raise read and decode errors instead of substituting placeholders.
        decoder_type: Decoder backend, ``None`` uses the process-wide default.
    """

    base_dir: str = DEFAULT_BASE_DIR
    filter: FilterKind = FilterKind.LANCZOS3
    strict: bool = False
    decoder_type: decoder.DecoderType | None = None


class ResourceLoader:
    def __init__(self, config: ResourceConfig | None = None):
        """Initializes the loader.

        Args:
            config: Resource settings, defaults to ``ResourceConfig()``.
        """
        self.config = config or ResourceConfig()

    def resolve_path(self, filename: str, policy: PathPolicy = PathPolicy.BASE_DIR) -> str:
        if not isinstance(policy, PathPolicy):
            raise TypeError(f"policy must be a PathPolicy, got {policy!r}")
        if policy is PathPolicy.AS_GIVEN:
            return filename
        return fs.join_path(self.config.base_dir, filename)

    def read_bytes(self, filename: str, policy: PathPolicy = PathPolicy.BASE_DIR) -> bytes:
        """Reads the whole resource file.

        Raises:
            FileNotFoundError: If the resolved path does not exist.
            OSError: If the file cannot be read.
        """
        return fs.read_bytes(self.resolve_path(filename, policy))

    def load_image(
        self,
        filename: str,
        policy: PathPolicy = PathPolicy.BASE_DIR,
        size: tuple[int, int] | None = None,
        filter: FilterKind | None = None,
    ) -> ColorImage:
        """Loads an image resource as a ColorImage.

        Args:
            filename: Resource filename.
            policy: How ``filename`` is resolved.
            size: Optional (width, height), the image is fill-resized to it.
            filter: Filter for the resize, defaults to the configured one.

        Returns:
            The decoded image, or ``ColorImage.example()`` if the file could not
            be read or decoded (unless the loader is strict).
        """
        try:
            data = self.read_bytes(filename, policy)
            raw = decoder.decode(data, self.config.decoder_type)
        except (OSError, DecodeError) as exc:
            if self.config.strict:
                raise
            LOGGER.warning("Using placeholder image for '%s': %s", filename, exc)
            return ColorImage.example()

        image = bridge.to_color_image(raw)
        if size is not None:
            image = resize_to_fill(image, size, filter or self.config.filter)
        return image

    def load_icon(self, filename: str) -> IconData | None:
        """Loads a window icon from the base directory, ``None`` if unavailable."""
        try:
            data = self.read_bytes(filename, PathPolicy.BASE_DIR)
            raw = decoder.decode(data, self.config.decoder_type)
        except (OSError, DecodeError) as exc:
            if self.config.strict:
                raise
            LOGGER.warning("No icon loaded from '%s': %s", filename, exc)
            return None

        rgba, width, height = bridge.im_flat(raw)
        return IconData(rgba=rgba, width=width, height=height)

    def load_font(
        self, fonts: FontDefinitions, name: str, filename: str, family: FamilyKey
    ) -> None:
        """Registers a font file from the base directory as the first font of ``family``."""
        try:
            data = self.read_bytes(filename, PathPolicy.BASE_DIR)
        except OSError as exc:
            if self.config.strict:
                raise
            LOGGER.warning("Font '%s' not registered, cannot read '%s': %s", name, filename, exc)
            return
        fonts.insert(name, FontData(data), family)

    def register_fonts(self, entries: Iterable[tuple[str, str, FamilyKey]]) -> FontDefinitions:
        """Builds font definitions from (name, filename, family) entries, in order."""
        fonts = FontDefinitions()
        for name, filename, family in entries:
            self.load_font(fonts, name, filename, family)
        return fonts
