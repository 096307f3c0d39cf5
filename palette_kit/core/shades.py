"""Lighter/darker shade derivation, straight in RGB (no Lab involved)."""

from palette_kit.core.colour import RGB, round_half_up
from palette_kit.core.palette import rgb_to_hex

SHADE_AMOUNT = 0.2


def lighten_channel(c: int, amount: float = SHADE_AMOUNT) -> int:
    return min(255, round_half_up(c * (1 + amount)))


def darken_channel(c: int, amount: float = SHADE_AMOUNT) -> int:
    return round_half_up(c * (1 - amount))


def lighten(rgb: RGB, amount: float = SHADE_AMOUNT) -> str:
    """Scale every channel up by amount, clamped to 255. Returns hex."""
    return rgb_to_hex(*(lighten_channel(c, amount) for c in rgb))


def darken(rgb: RGB, amount: float = SHADE_AMOUNT) -> str:
    """Scale every channel down by amount. Returns hex."""
    return rgb_to_hex(*(darken_channel(c, amount) for c in rgb))
