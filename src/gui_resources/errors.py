"""Errors raised by the pixel buffer pipeline."""


class ShapeMismatchError(ValueError):
    """Declared image dimensions disagree with the number of pixels or bytes."""


class DegenerateSourceError(ValueError):
    """A zero-area source image was asked to fill a non-empty target."""


class DecodeError(RuntimeError):
    """Encoded image bytes could not be decoded to RGBA8."""
