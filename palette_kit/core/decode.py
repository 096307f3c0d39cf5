"""Image decoding — bytes or path in, (N, 3) RGB pixel array out.

Uses Pillow. Accepts JPEG, PNG and WebP up to a byte limit (5 MB by
default, matching the upload cap of the web tool). Alpha is dropped, not
composited: a transparent pixel contributes its stored RGB.

Pixels come out in row-major scan order, which the quantizer's 'first'
seeding depends on.
"""

import io
import os
from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image, UnidentifiedImageError

from palette_kit.core.errors import ImageDecodeError, ImageTooLargeError, UnsupportedImageTypeError

MAX_FILE_BYTES = 5 * 1024 * 1024
ALLOWED_FORMATS = ('JPEG', 'PNG', 'WEBP')


def read_image_bytes(source: bytes | str | os.PathLike) -> bytes:
    """Return raw bytes from bytes or a file path."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return Path(source).read_bytes()


def decode_image(source: bytes | str | os.PathLike, max_file_bytes: int = MAX_FILE_BYTES) -> np.ndarray:
    """Decode an encoded image into a uint8 (N, 3) pixel array."""
    data = read_image_bytes(source)
    if len(data) > max_file_bytes:
        raise ImageTooLargeError(f'Image is {len(data)} bytes, limit is {max_file_bytes}')

    try:
        image = Image.open(io.BytesIO(data))
        fmt = image.format
        if fmt not in ALLOWED_FORMATS:
            raise UnsupportedImageTypeError(f'Unsupported image type {fmt!r}. Use JPEG, PNG or WebP')
        limit = Image.MAX_IMAGE_PIXELS
        if limit and image.width * image.height > limit:
            raise ImageTooLargeError(f'Image is {image.width}x{image.height}, limit is {limit} pixels')
        rgba = np.asarray(image.convert('RGBA'), dtype=np.uint8)
    except Image.DecompressionBombError as exc:
        raise ImageTooLargeError(str(exc)) from exc
    except UnidentifiedImageError as exc:
        raise ImageDecodeError('Could not decode image data') from exc
    except OSError as exc:
        # Truncated or corrupt files fail on pixel load, not on open
        raise ImageDecodeError(f'Could not decode image data: {exc}') from exc

    height, width = rgba.shape[:2]
    logger.debug(f'Decoded {fmt} image {width}x{height}')
    return rgba.reshape(-1, 4)[:, :3]


def pixels_from_rgba(buffer: bytes | bytearray | memoryview, width: int, height: int) -> np.ndarray:
    """Flat RGBA bytes (width × height × 4) → uint8 (N, 3) RGB array."""
    arr = np.frombuffer(bytes(buffer), dtype=np.uint8)
    expected = width * height * 4
    if width <= 0 or height <= 0 or arr.size != expected:
        raise ImageDecodeError(f'RGBA buffer has {arr.size} bytes, expected {width}x{height}x4 = {expected}')
    return arr.reshape(-1, 4)[:, :3]
