"""Error types raised by the palette pipeline.

Everything derives from PaletteError so callers can catch one class.
Decoder failures are split out because they originate before analysis starts.
"""


class PaletteError(Exception):
    """Base class for palette-kit errors."""


class InsufficientPixelsError(PaletteError, ValueError):
    """Fewer pixels than requested colours — centroids cannot be seeded."""

    def __init__(self, count: int, k: int):
        self.count = count
        self.k = k
        super().__init__(f'Need at least {k} pixels to extract {k} colours, got {count}')


class ImageDecodeError(PaletteError):
    """The image bytes could not be turned into a pixel buffer."""


class ImageTooLargeError(ImageDecodeError):
    """The encoded image exceeds the configured upload limit."""


class UnsupportedImageTypeError(ImageDecodeError):
    """The image decoded, but its format is not JPEG, PNG or WebP."""
