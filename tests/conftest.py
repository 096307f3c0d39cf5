"""Shared fixtures: PALETTE_* isolation and in-memory test images."""

import io
import os
from collections.abc import Callable

import numpy as np
import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_palette_env():
    """Hide the caller's PALETTE_* settings and drop any a test leaves behind."""
    saved = {k: v for k, v in os.environ.items() if k.startswith('PALETTE_')}
    for key in saved:
        del os.environ[key]
    yield
    for key in [k for k in os.environ if k.startswith('PALETTE_')]:
        del os.environ[key]
    os.environ.update(saved)


def _encode(pixels: np.ndarray, fmt: str = 'PNG') -> bytes:
    buf = io.BytesIO()
    Image.fromarray(pixels.astype(np.uint8)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def encode() -> Callable[..., bytes]:
    """Encode an (H, W, 3|4) uint8 array as image bytes (PNG by default)."""
    return _encode


@pytest.fixture
def split_pixels() -> np.ndarray:
    """10×10 image, top half black, bottom half white, as (100, 3) scan order."""
    arr = np.zeros((10, 10, 3), dtype=np.uint8)
    arr[5:] = 255
    return arr.reshape(-1, 3)


@pytest.fixture
def red_png() -> bytes:
    arr = np.zeros((10, 10, 3), dtype=np.uint8)
    arr[..., 0] = 255
    return _encode(arr)
