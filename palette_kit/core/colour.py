"""sRGB → CIE L*a*b* conversion and perceptual distance.

Lab distance is plain Euclidean (CIE76), not CIEDE2000. It is only used to
rank candidates (nearest centroid, nearest named colour), so monotonic is
good enough.

Two flavours of the same transform live here:
  rgb_to_lab        — one triple, pure Python floats
  rgb_to_lab_array  — (N, 3) numpy array, used by the quantizer to convert
                      every pixel once per analysis
"""

import math

import numpy as np

RGB = tuple[int, int, int]
Lab = tuple[float, float, float]

# D65 reference white, XYZ scaled ×100
XN = 95.047
YN = 100.0
ZN = 108.883

_SRGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)

_EPSILON = (6 / 29) ** 3
_KAPPA = (1 / 3) * (29 / 6) ** 2


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (2.5 → 3, not banker's 2)."""
    return int(math.floor(x + 0.5))


def _decode_gamma(c: float) -> float:
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > _EPSILON else _KAPPA * t + 4 / 29


def rgb_to_lab(rgb: RGB) -> Lab:
    """Convert an 8-bit sRGB triple to (L, a, b)."""
    rr, gg, bb = (_decode_gamma(c / 255) for c in rgb)

    x = (rr * 0.4124 + gg * 0.3576 + bb * 0.1805) * 100
    y = (rr * 0.2126 + gg * 0.7152 + bb * 0.0722) * 100
    z = (rr * 0.0193 + gg * 0.1192 + bb * 0.9505) * 100

    fx, fy, fz = _lab_f(x / XN), _lab_f(y / YN), _lab_f(z / ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def rgb_to_lab_array(pixels: np.ndarray) -> np.ndarray:
    """Vectorized rgb_to_lab for an (N, 3) array. Returns float64 (N, 3)."""
    c = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92)
    xyz = linear @ _SRGB_TO_XYZ.T * 100
    t = xyz / np.array([XN, YN, ZN])
    f = np.where(t > _EPSILON, np.cbrt(t), _KAPPA * t + 4 / 29)
    lab = np.empty_like(f)
    lab[:, 0] = 116 * f[:, 1] - 16
    lab[:, 1] = 500 * (f[:, 0] - f[:, 1])
    lab[:, 2] = 200 * (f[:, 1] - f[:, 2])
    return lab


def lab_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance between two RGB triples in Lab space."""
    if tuple(a) == tuple(b):
        return 0.0
    l1, a1, b1 = rgb_to_lab(a)
    l2, a2, b2 = rgb_to_lab(b)
    return math.sqrt((l2 - l1) ** 2 + (a2 - a1) ** 2 + (b2 - b1) ** 2)


def luma(rgb: RGB) -> float:
    """ITU-R style weighted brightness on raw RGB, 0–255."""
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000
