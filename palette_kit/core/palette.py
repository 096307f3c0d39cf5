"""Named reference colours and hex helpers.

NAMED_COLOURS is the small fixed palette every swatch gets a human name from.
Order matters: on an exact distance tie the earlier entry wins.
"""

from palette_kit.core.colour import RGB, lab_distance, round_half_up

NAMED_COLOURS: dict[str, RGB] = {
    'Red': (255, 0, 0),
    'Green': (0, 255, 0),
    'Blue': (0, 0, 255),
    'Yellow': (255, 255, 0),
    'Cyan': (0, 255, 255),
    'Magenta': (255, 0, 255),
    'White': (255, 255, 255),
    'Black': (0, 0, 0),
    'Gray': (128, 128, 128),
    'Orange': (255, 165, 0),
    'Purple': (128, 0, 128),
    'Brown': (165, 42, 42),
    'Pink': (255, 192, 203),
    'Navy': (0, 0, 128),
    'Teal': (0, 128, 128),
    'Maroon': (128, 0, 0),
    'Olive': (128, 128, 0),
    'Silver': (192, 192, 192),
    'Gold': (255, 215, 0),
    'Indigo': (75, 0, 130),
    'Violet': (238, 130, 238),
    'Beige': (245, 245, 220),
    'Coral': (255, 127, 80),
    'Crimson': (220, 20, 60),
}


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """'#rrggbb', lowercase, zero-padded. Fractional channels are rounded half-up."""
    return '#' + ''.join(f'{round_half_up(c):02x}' for c in (r, g, b))


def nearest_colour(rgb: RGB) -> tuple[str, float]:
    """Find the nearest named colour by Lab distance. Returns (name, distance)."""
    best_name = ''
    best_dist = float('inf')
    for name, ref in NAMED_COLOURS.items():
        d = lab_distance(rgb, ref)
        if d < best_dist:
            best_dist = d
            best_name = name
    return best_name, best_dist


def nearest_name(rgb: RGB) -> str:
    name, _dist = nearest_colour(rgb)
    return name
