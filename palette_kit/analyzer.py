"""Pipeline entry points: pixels / RGBA buffer / encoded image → ColorAnalysisResult.

    pixels ─ quantize ─▶ 5 centroids ─ compose ─▶ ColorPalette
                                   └─ exporters ─▶ tailwind + css text

Each call is self-contained; nothing is cached between analyses.
"""

import os
from collections.abc import Sequence

import numpy as np
from loguru import logger

from palette_kit import registry
from palette_kit.core.compose import compose_from_swatches, role_swatches
from palette_kit.core.config import AnalyzerConfig
from palette_kit.core.decode import decode_image, pixels_from_rgba
from palette_kit.core.quantize import quantize
from palette_kit.core.types import ColorAnalysisResult


def analyze_pixels(
    pixels: np.ndarray | Sequence[Sequence[int]],
    config: AnalyzerConfig | None = None,
) -> ColorAnalysisResult:
    """Run quantize → compose → export on an (N, 3) pixel list."""
    cfg = (config or AnalyzerConfig()).validate()
    centroids = quantize(
        pixels,
        k=cfg.max_colors,
        max_iterations=cfg.max_iterations,
        seeding=cfg.seeding,
        empty_cluster=cfg.empty_cluster,
    )
    swatches = role_swatches(centroids)
    palette = compose_from_swatches(swatches)
    logger.debug(f'Palette: {", ".join(f"{role}={c.hex}" for role, c in palette.items())}')

    return ColorAnalysisResult(
        palette=palette,
        tailwind_config=registry.get('tailwind').execute(swatches),
        css_variables=registry.get('css').execute(swatches),
        swatches=tuple(swatches),
    )


def analyze_rgba(
    buffer: bytes | bytearray | memoryview,
    width: int,
    height: int,
    config: AnalyzerConfig | None = None,
) -> ColorAnalysisResult:
    """Analyze a raw RGBA buffer as produced by a canvas or decoder."""
    return analyze_pixels(pixels_from_rgba(buffer, width, height), config)


def analyze_image(
    source: bytes | str | os.PathLike,
    config: AnalyzerConfig | None = None,
) -> ColorAnalysisResult:
    """Decode a JPEG/PNG/WebP (bytes or path) and analyze it."""
    cfg = (config or AnalyzerConfig()).validate()
    pixels = decode_image(source, max_file_bytes=cfg.max_file_bytes)
    return analyze_pixels(pixels, cfg)
