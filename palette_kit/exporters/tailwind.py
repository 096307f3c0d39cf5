"""Tailwind theme config with light/dark shades and two gradients.

Emits a `module.exports = {...}` block for tailwind.config.js:

  primary / secondary / accent   DEFAULT, light (+20%), dark (-20%)
  background                     DEFAULT, darker, lighter
  content                        DEFAULT, muted (text-adjusted)
  backgroundImage                gradient-primary (primary → secondary)
                                 gradient-accent  (accent → secondary)

Values come from the unadjusted role colours.

Example:
    palette-kit tailwind hero.png > theme.colors.js
"""

from palette_kit.core.compose import adjust_for_text
from palette_kit.core.shades import darken, lighten
from palette_kit.core.types import Color, Exporter

exporter = Exporter(
    name='tailwind',
    help='Tailwind theme.extend config: role colours with light/dark shades and gradients.',
)


def _shaded(role: str, colour: Color) -> str:
    return (
        f'        {role}: {{\n'
        f"          DEFAULT: '{colour.hex}',\n"
        f"          light: '{lighten(colour.rgb)}',\n"
        f"          dark: '{darken(colour.rgb)}'\n"
        f'        }},'
    )


@exporter.render
def render(swatches: list[Color]) -> str:
    primary, secondary, accent, background, content = swatches
    lines = [
        'module.exports = {',
        '  theme: {',
        '    extend: {',
        '      colors: {',
        _shaded('primary', primary),
        _shaded('secondary', secondary),
        _shaded('accent', accent),
        '        background: {',
        f"          DEFAULT: '{background.hex}',",
        f"          darker: '{darken(background.rgb)}',",
        f"          lighter: '{lighten(background.rgb)}'",
        '        },',
        '        content: {',
        f"          DEFAULT: '{content.hex}',",
        f"          muted: '{adjust_for_text(content).hex}'",
        '        }',
        '      },',
        '      backgroundImage: {',
        f"        'gradient-primary': 'linear-gradient(to right, {primary.hex}, {secondary.hex})',",
        f"        'gradient-accent': 'linear-gradient(to right, {accent.hex}, {secondary.hex})'",
        '      }',
        '    }',
        '  }',
        '}',
    ]
    return '\n'.join(lines)
