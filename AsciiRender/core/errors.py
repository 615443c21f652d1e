# Error types


class AsciiRenderError(Exception):
    """Base class for conversion failures reported to the caller."""


class MissingImageError(AsciiRenderError):
    """No source image was supplied."""


class ImageDecodeError(AsciiRenderError):
    """The source image could not be decoded."""
