"""Shared types for palette-kit: Color, ColorPalette, ColorAnalysisResult, Exporter."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from palette_kit.core.colour import RGB

ROLES = ('primary', 'secondary', 'accent', 'background', 'text')


@dataclass(frozen=True)
class Color:
    """One palette swatch."""

    hex: str  # '#rrggbb', lowercase
    rgb: RGB  # (r, g, b), 0–255
    name: str  # nearest named colour
    usage: str | None = None  # role description, static text

    def with_rgb(self, rgb: RGB, hex_str: str) -> Color:
        """Copy with new channel values. The name is kept from the original."""
        return replace(self, rgb=rgb, hex=hex_str)

    def to_dict(self) -> dict[str, Any]:
        r, g, b = self.rgb
        obj: dict[str, Any] = {'hex': self.hex, 'rgb': {'r': r, 'g': g, 'b': b}, 'name': self.name}
        if self.usage is not None:
            obj['usage'] = self.usage
        return obj


@dataclass(frozen=True)
class ColorPalette:
    """Exactly five role-named swatches."""

    primary: Color
    secondary: Color
    accent: Color
    background: Color
    text: Color

    def items(self) -> list[tuple[str, Color]]:
        return [(role, getattr(self, role)) for role in ROLES]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {role: colour.to_dict() for role, colour in self.items()}


@dataclass(frozen=True)
class ColorAnalysisResult:
    """Terminal output of one analysis."""

    palette: ColorPalette
    tailwind_config: str
    css_variables: str
    # Unadjusted role colours the exports were rendered from
    swatches: tuple[Color, ...] = field(default=(), compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """JSON shape handed to web callers."""
        return {
            'palette': self.palette.to_dict(),
            'tailwindConfig': self.tailwind_config,
            'cssVariables': self.css_variables,
        }


class Exporter:
    """A self-registering export format.

    Usage in an exporter module:

        exporter = Exporter(name='css', help='CSS custom properties')

        @exporter.render
        def render(swatches):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._render_fn: Callable[[list[Color]], str] | None = None

    def render(self, fn: Callable[[list[Color]], str]) -> Callable[[list[Color]], str]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def execute(self, swatches: list[Color]) -> str:
        """Render the five role swatches (role order) to export text."""
        if self._render_fn is None:
            raise RuntimeError(f'Exporter {self.name} has no render function')
        if len(swatches) != len(ROLES):
            raise ValueError(f'Exporter {self.name} needs {len(ROLES)} swatches, got {len(swatches)}')
        return self._render_fn(swatches)
