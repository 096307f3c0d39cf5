"""Tests for palette_kit.core.compose — role assignment and contrast fixes."""

import pytest
from palette_kit.core.colour import luma
from palette_kit.core.compose import (
    USAGE,
    adjust_for_background,
    adjust_for_text,
    compose_palette,
    role_swatches,
    to_colour,
)
from palette_kit.core.errors import PaletteError
from palette_kit.core.types import ROLES

CENTROIDS = [(100, 150, 200), (10, 20, 30), (250, 100, 50), (200, 200, 200), (20, 20, 20)]


class TestToColour:
    def test_fields(self):
        c = to_colour((255, 0, 0))
        assert c.hex == '#ff0000'
        assert c.rgb == (255, 0, 0)
        assert c.name == 'Red'
        assert c.usage is None


class TestAdjustForBackground:
    def test_light_is_darkened_15_percent(self):
        c = adjust_for_background(to_colour((200, 200, 200)))
        assert c.rgb == (170, 170, 170)
        assert c.hex == '#aaaaaa'

    def test_name_survives_adjustment(self):
        c = adjust_for_background(to_colour((255, 255, 255)))
        assert c.name == 'White'
        assert c.rgb == (217, 217, 217)

    def test_dark_unchanged(self):
        original = to_colour((100, 100, 100))
        assert adjust_for_background(original) == original

    def test_threshold_is_exclusive(self):
        original = to_colour((128, 128, 128))
        assert adjust_for_background(original) == original


class TestAdjustForText:
    def test_black_moves_90_percent_to_white(self):
        c = adjust_for_text(to_colour((0, 0, 0)))
        assert c.rgb == (230, 230, 230)
        assert c.name == 'Black'

    def test_red_is_lightened(self):
        # luma 76 < 128
        c = adjust_for_text(to_colour((255, 0, 0)))
        assert c.rgb == (255, 230, 230)
        assert c.hex == '#ffe6e6'

    def test_light_unchanged(self):
        original = to_colour((200, 200, 200))
        assert adjust_for_text(original) == original

    def test_threshold_is_exclusive(self):
        original = to_colour((128, 128, 128))
        assert adjust_for_text(original) == original


class TestComposePalette:
    def test_positional_roles(self):
        palette = compose_palette(CENTROIDS)
        assert palette.primary.rgb == (100, 150, 200)
        assert palette.secondary.rgb == (10, 20, 30)
        assert palette.accent.rgb == (250, 100, 50)

    def test_background_and_text_adjusted(self):
        palette = compose_palette(CENTROIDS)
        assert palette.background.rgb == (170, 170, 170)
        assert palette.text.rgb == (232, 232, 232)

    def test_usage_attached(self):
        palette = compose_palette(CENTROIDS)
        for role, colour in palette.items():
            assert colour.usage == USAGE[role]

    def test_role_order(self):
        assert [role for role, _c in compose_palette(CENTROIDS).items()] == list(ROLES)

    def test_brightness_guarantee(self):
        palette = compose_palette(CENTROIDS)
        assert luma(palette.background.rgb) <= luma(CENTROIDS[3])
        assert luma(palette.text.rgb) >= luma(CENTROIDS[4])

    def test_duplicates_not_deduplicated(self):
        palette = compose_palette([(50, 60, 70)] * 5)
        assert palette.primary.hex == palette.secondary.hex == palette.accent.hex == '#323c46'

    def test_wrong_count(self):
        with pytest.raises(PaletteError):
            compose_palette(CENTROIDS[:4])

    def test_role_swatches_unadjusted(self):
        swatches = role_swatches(CENTROIDS)
        assert swatches[3].rgb == (200, 200, 200)
        assert swatches[4].rgb == (20, 20, 20)
