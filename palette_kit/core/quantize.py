"""Colour quantization — Lloyd's algorithm with Lab-space assignment.

Reduces a pixel population to k representative RGB colours:

  1. Seed k centroids ('first': the first k pixels in scan order,
     'farthest': deterministic farthest-point seeding).
  2. Repeat exactly max_iterations times (no convergence check):
       assign every pixel to its nearest centroid (Lab Euclidean,
       ties to the lowest centroid index), then move each centroid to the
       half-up rounded mean of its pixels.
  3. A centroid that gets no pixels either takes the pixel worst served by
     its current centroid ('reseed') or collapses to black ('black').

Pixel Lab values are computed once up front. Centroid Lab values are
recomputed each round (k conversions). Nothing is random, so identical
input always gives identical output.
"""

from collections.abc import Sequence

import numpy as np
from loguru import logger

from palette_kit.core.colour import RGB, rgb_to_lab_array
from palette_kit.core.errors import InsufficientPixelsError

SEEDING_MODES = ('first', 'farthest')
EMPTY_CLUSTER_MODES = ('reseed', 'black')

DEFAULT_K = 5
DEFAULT_MAX_ITERATIONS = 20


def as_pixel_array(pixels: np.ndarray | Sequence[Sequence[int]]) -> np.ndarray:
    """Coerce pixels to an int64 (N, 3) array. Extra channels (alpha) are dropped."""
    arr = np.asarray(pixels, dtype=np.int64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise ValueError(f'Expected an (N, 3) pixel array, got shape {arr.shape}')
    return arr[:, :3]


def _sq_distances(lab_pixels: np.ndarray, lab_centroids: np.ndarray) -> np.ndarray:
    """(N, k) squared Lab distances, one centroid column at a time."""
    out = np.empty((len(lab_pixels), len(lab_centroids)), dtype=np.float64)
    for j, c in enumerate(lab_centroids):
        diff = lab_pixels - c
        out[:, j] = np.einsum('nc,nc->n', diff, diff)
    return out


def _seed(pixels: np.ndarray, lab: np.ndarray, k: int, seeding: str) -> np.ndarray:
    if seeding == 'first':
        return pixels[:k].astype(np.float64)

    # Farthest-point: start at pixel 0, then keep adding the pixel furthest
    # from every seed chosen so far. argmax picks the lowest index on ties.
    chosen = [0]
    nearest = np.sum((lab - lab[0]) ** 2, axis=1)
    for _ in range(1, k):
        idx = int(np.argmax(nearest))
        chosen.append(idx)
        nearest = np.minimum(nearest, np.sum((lab - lab[idx]) ** 2, axis=1))
    return pixels[chosen].astype(np.float64)


def quantize(
    pixels: np.ndarray | Sequence[Sequence[int]],
    k: int = DEFAULT_K,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    seeding: str = 'first',
    empty_cluster: str = 'reseed',
) -> list[RGB]:
    """Cluster pixels into k colours. Returns k (r, g, b) int triples in centroid order."""
    if seeding not in SEEDING_MODES:
        raise ValueError(f'Unknown seeding mode: {seeding}. Available: {", ".join(SEEDING_MODES)}')
    if empty_cluster not in EMPTY_CLUSTER_MODES:
        raise ValueError(f'Unknown empty-cluster mode: {empty_cluster}. Available: {", ".join(EMPTY_CLUSTER_MODES)}')
    if k < 1:
        raise ValueError(f'k must be >= 1, got {k}')

    px = as_pixel_array(pixels)
    n = len(px)
    if n < k:
        raise InsufficientPixelsError(n, k)

    lab = rgb_to_lab_array(px)
    centroids = _seed(px, lab, k, seeding)
    logger.debug(f'Quantizing {n} pixels into {k} colours ({seeding} seeding, {max_iterations} rounds)')

    reseeds = 0
    for _ in range(max_iterations):
        dist = _sq_distances(lab, rgb_to_lab_array(centroids))
        labels = np.argmin(dist, axis=1)
        counts = np.bincount(labels, minlength=k)

        sums = np.zeros((k, 3), dtype=np.float64)
        np.add.at(sums, labels, px)
        updated = np.zeros((k, 3), dtype=np.float64)
        filled = counts > 0
        updated[filled] = np.floor(sums[filled] / counts[filled, None] + 0.5)

        empty = np.flatnonzero(~filled)
        if len(empty) and empty_cluster == 'reseed':
            # How badly each pixel is served by the centroid it was assigned to
            slack = dist[np.arange(n), labels].copy()
            for j in empty:
                idx = int(np.argmax(slack))
                updated[j] = px[idx]
                slack[idx] = -1.0
                reseeds += 1
        centroids = updated

    if reseeds:
        logger.debug(f'Reseeded {reseeds} empty cluster(s)')
    return [(int(c[0]), int(c[1]), int(c[2])) for c in centroids]
