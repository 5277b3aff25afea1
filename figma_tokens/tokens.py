"""Design token models produced by the importer.

This module defines the token set extracted from a Figma file: scales
(breakpoints, radii, sizes, spacing), the colour palette, shadows,
typography, grid and text variants, and icons.
"""

import json
from dataclasses import dataclass, field, fields
from typing import Any, Union

# A value that may vary per breakpoint, e.g. {"sm": "1rem", "md": "1.25rem"}
Responsive = Union[str, dict[str, str]]
ResponsiveInt = Union[int, dict[str, int]]

# Nested colour names, e.g. {"brand": {"primary": "#ff0000"}}
Palette = dict[str, Any]


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


@dataclass
class GridVariant:
    """A column grid layout, keyed by breakpoint when responsive."""

    columns: ResponsiveInt = 0
    gutter: Responsive = "0"
    margin: Responsive = "0"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridVariant":
        """Create from dictionary."""
        return cls(
            columns=data.get("columns", 0),
            gutter=data.get("gutter", "0"),
            margin=data.get("margin", "0"),
        )


@dataclass
class TextVariant:
    """A complete text style, keyed by breakpoint when responsive."""

    font_family: Responsive = ""
    font_size: Responsive = ""
    font_style: Responsive = "normal"
    font_weight: Responsive = "400"
    letter_spacing: Responsive = "0"
    line_height: Responsive = ""
    text_decoration_line: Responsive = "none"
    text_transform: Responsive = "none"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (camelCase keys)."""
        return {_camel_case(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextVariant":
        """Create from dictionary."""
        return cls(
            **{
                f.name: data[_camel_case(f.name)]
                for f in fields(cls)
                if _camel_case(f.name) in data
            }
        )


@dataclass
class Typography:
    """Typography scales, each mapping a token name to a CSS value."""

    fonts: dict[str, str] = field(default_factory=dict)
    font_sizes: dict[str, str] = field(default_factory=dict)
    line_heights: dict[str, str] = field(default_factory=dict)
    letter_spacing: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "fonts": dict(self.fonts),
            "fontSizes": dict(self.font_sizes),
            "lineHeights": dict(self.line_heights),
            "letterSpacing": dict(self.letter_spacing),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Typography":
        """Create from dictionary."""
        return cls(
            fonts=data.get("fonts", {}),
            font_sizes=data.get("fontSizes", {}),
            line_heights=data.get("lineHeights", {}),
            letter_spacing=data.get("letterSpacing", {}),
        )


@dataclass
class Tokens:
    """All design tokens extracted from one Figma file.

    Scales keep the ascending order they were extracted in; ``to_dict``
    preserves it so consumers can rely on sorted keys.
    """

    breakpoints: dict[str, str] = field(default_factory=dict)
    colours: Palette = field(default_factory=dict)
    grid_styles: dict[str, GridVariant] = field(default_factory=dict)
    icons: dict[str, str] = field(default_factory=dict)  # Name -> optimized SVG
    radii: dict[str, str] = field(default_factory=dict)
    shadows: dict[str, str] = field(default_factory=dict)
    sizes: dict[str, str] = field(default_factory=dict)
    spacing: dict[str, str] = field(default_factory=dict)
    typography: Typography = field(default_factory=Typography)
    text_styles: dict[str, TextVariant] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the token object shape consumed by the theme."""
        return {
            "breakpoints": dict(self.breakpoints),
            "colours": self.colours,
            "gridStyles": {k: v.to_dict() for k, v in self.grid_styles.items()},
            "icons": dict(self.icons),
            "radii": dict(self.radii),
            "shadows": dict(self.shadows),
            "sizes": dict(self.sizes),
            "spacing": dict(self.spacing),
            "typography": self.typography.to_dict(),
            "textStyles": {k: v.to_dict() for k, v in self.text_styles.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tokens":
        """Create from dictionary."""
        return cls(
            breakpoints=data.get("breakpoints", {}),
            colours=data.get("colours", {}),
            grid_styles={
                k: GridVariant.from_dict(v)
                for k, v in data.get("gridStyles", {}).items()
            },
            icons=data.get("icons", {}),
            radii=data.get("radii", {}),
            shadows=data.get("shadows", {}),
            sizes=data.get("sizes", {}),
            spacing=data.get("spacing", {}),
            typography=Typography.from_dict(data.get("typography", {})),
            text_styles={
                k: TextVariant.from_dict(v)
                for k, v in data.get("textStyles", {}).items()
            },
        )

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the token object to JSON."""
        return json.dumps(self.to_dict(), indent=indent)

    @property
    def total_tokens(self) -> int:
        """Total number of tokens across all categories."""
        return (
            len(self.breakpoints)
            + count_leaves(self.colours)
            + len(self.grid_styles)
            + len(self.icons)
            + len(self.radii)
            + len(self.shadows)
            + len(self.sizes)
            + len(self.spacing)
            + len(self.typography.fonts)
            + len(self.typography.font_sizes)
            + len(self.typography.line_heights)
            + len(self.typography.letter_spacing)
            + len(self.text_styles)
        )


def count_leaves(palette: Palette) -> int:
    """Count the colour values of a palette, however deeply nested."""
    return sum(
        count_leaves(value) if isinstance(value, dict) else 1
        for value in palette.values()
    )
