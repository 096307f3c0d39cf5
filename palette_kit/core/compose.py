"""Palette composer — map quantized centroids onto the five named roles.

Centroids are assigned positionally (centroid order, not size or lightness):

  primary, secondary, accent, background, text

Two roles get a brightness fix so the palette works as a dark theme:
  background  luma > 128  → every channel scaled down 15%
  text        luma < 128  → every channel moved 90% of the way to 255

Names are looked up once on the raw centroid and survive the adjustment.
Near-duplicate roles are left alone.
"""

from collections.abc import Sequence
from dataclasses import replace

from palette_kit.core.colour import RGB, luma, round_half_up
from palette_kit.core.errors import PaletteError
from palette_kit.core.palette import nearest_name, rgb_to_hex
from palette_kit.core.types import ROLES, Color, ColorPalette

USAGE = {
    'primary': 'Primary brand color, gradient starts',
    'secondary': 'Secondary color, gradient ends',
    'accent': 'Accents and highlights',
    'background': 'Page and card backgrounds',
    'text': 'Typography and content',
}

BRIGHTNESS_THRESHOLD = 128
BACKGROUND_DARKEN = 0.15
TEXT_LIGHTEN = 0.9


def to_colour(rgb: RGB) -> Color:
    r, g, b = (int(c) for c in rgb)
    return Color(hex=rgb_to_hex(r, g, b), rgb=(r, g, b), name=nearest_name((r, g, b)))


def adjust_for_background(colour: Color) -> Color:
    """Darken a light colour so it can sit behind light text."""
    if luma(colour.rgb) > BRIGHTNESS_THRESHOLD:
        r, g, b = (round_half_up(c * (1 - BACKGROUND_DARKEN)) for c in colour.rgb)
        return colour.with_rgb((r, g, b), rgb_to_hex(r, g, b))
    return colour


def adjust_for_text(colour: Color) -> Color:
    """Lighten a dark colour so it reads on a dark background."""
    if luma(colour.rgb) < BRIGHTNESS_THRESHOLD:
        r, g, b = (round_half_up(c + (255 - c) * TEXT_LIGHTEN) for c in colour.rgb)
        return colour.with_rgb((r, g, b), rgb_to_hex(r, g, b))
    return colour


def role_swatches(centroids: Sequence[RGB]) -> list[Color]:
    """Unadjusted, named swatches in role order."""
    if len(centroids) != len(ROLES):
        raise PaletteError(f'A palette needs exactly {len(ROLES)} colours, got {len(centroids)}')
    return [to_colour(c) for c in centroids]


def compose_palette(centroids: Sequence[RGB]) -> ColorPalette:
    """Assign centroids to roles and apply the background/text adjustments."""
    swatches = role_swatches(centroids)
    return compose_from_swatches(swatches)


def compose_from_swatches(swatches: Sequence[Color]) -> ColorPalette:
    primary, secondary, accent, background, text = swatches
    return ColorPalette(
        primary=_with_usage(primary, 'primary'),
        secondary=_with_usage(secondary, 'secondary'),
        accent=_with_usage(accent, 'accent'),
        background=_with_usage(adjust_for_background(background), 'background'),
        text=_with_usage(adjust_for_text(text), 'text'),
    )


def _with_usage(colour: Color, role: str) -> Color:
    return replace(colour, usage=USAGE[role])
