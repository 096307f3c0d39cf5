"""Report builder — text and JSON output for palette-kit results."""

import json
import os

from palette_kit.core.types import ColorAnalysisResult


def format_text(result: ColorAnalysisResult, image_path: str | None = None) -> str:
    """Format a palette as a human-readable swatch table."""
    lines = []
    if image_path:
        lines.append(f'palette-kit: {os.path.basename(image_path)}')
        lines.append('')

    for role, colour in result.palette.items():
        r, g, b = colour.rgb
        rgb = f'rgb({r},{g},{b})'
        lines.append(f'  {role:<11} {colour.hex}  {rgb:<17} {colour.name:<8}  {colour.usage or ""}')

    lines.append('')
    lines.append('Exports: palette-kit tailwind <image> | palette-kit css <image>')
    return '\n'.join(lines)


def format_json(result: ColorAnalysisResult) -> str:
    """Format the full analysis result as JSON (web response shape)."""
    return json.dumps(result.to_dict(), indent=2)
