class Code128Error(Exception):
    """Base class for errors raised by code128b."""


class RenderBackendError(Code128Error):
    """The imaging backend could not provide a font or an image buffer."""


class ColorError(Code128Error, ValueError):
    """A color name or HTML color code could not be translated."""
