"""CSS custom properties on :root, plus gradient and component aliases.

Base variables carry the hex values (--color-primary, -light, -dark, ...).
Gradients and component aliases (buttons, cards, text) only reference
other variables, so retheming means changing the base block alone.

Example:
    palette-kit css hero.png > theme.css
"""

from palette_kit.core.compose import adjust_for_text
from palette_kit.core.shades import darken, lighten
from palette_kit.core.types import Color, Exporter

exporter = Exporter(
    name='css',
    help='CSS :root custom properties with shades, gradients and component aliases.',
)

COMPONENT_ALIASES = [
    ('button-primary', 'gradient-primary'),
    ('button-secondary', 'gradient-accent'),
    ('card-background', 'color-background-darker'),
    ('card-border', 'color-background-lighter'),
    ('text-primary', 'color-content'),
    ('text-muted', 'color-content-muted'),
]


@exporter.render
def render(swatches: list[Color]) -> str:
    primary, secondary, accent, background, content = swatches
    lines = [':root {', '  /* Base colors */']
    for role, colour in (('primary', primary), ('secondary', secondary), ('accent', accent)):
        lines.append(f'  --color-{role}: {colour.hex};')
        lines.append(f'  --color-{role}-light: {lighten(colour.rgb)};')
        lines.append(f'  --color-{role}-dark: {darken(colour.rgb)};')
        lines.append('  ')
    lines += [
        f'  --color-background: {background.hex};',
        f'  --color-background-darker: {darken(background.rgb)};',
        f'  --color-background-lighter: {lighten(background.rgb)};',
        '  ',
        f'  --color-content: {content.hex};',
        f'  --color-content-muted: {adjust_for_text(content).hex};',
        '',
        '  /* Gradients */',
        '  --gradient-primary: linear-gradient(to right, var(--color-primary), var(--color-secondary));',
        '  --gradient-accent: linear-gradient(to right, var(--color-accent), var(--color-secondary));',
        '',
        '  /* Component variables */',
    ]
    lines += [f'  --color-{alias}: var(--{target});' for alias, target in COMPONENT_ALIASES]
    lines.append('}')
    return '\n'.join(lines)
