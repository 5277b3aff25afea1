"""Extraction of responsive grid and text variants from shared styles.

A style named "body/sm" holds the "body" variant at the "sm" breakpoint:
its attributes are written per breakpoint, e.g.
``body.font_size == {"sm": "1rem", "md": "1.125rem"}``. A style without a
breakpoint suffix defines a flat variant. Once all nodes are processed,
attributes whose breakpoint values are all equal are collapsed back into a
single value.
"""

from dataclasses import fields, replace
from typing import Any, TypeVar

from ..models import FigmaNode, Style, StyleType, TypeStyle
from ..tokens import GridVariant, TextVariant
from ..tokens_logging import get_logger
from ..tree import find_frames, find_texts
from ..units import (
    DEFAULT_BASE_FONT_SIZE,
    format_number,
    letter_spacing_to_em,
    line_height_value,
    text_decoration_value,
    text_transform_value,
    to_rem,
)

logger = get_logger("extractors")

BREAKPOINT_SEPARATOR = "/"

Variant = TypeVar("Variant", GridVariant, TextVariant)


def flatten_variant(variant: Variant) -> Variant:
    """Collapse per-breakpoint attributes whose values are all identical.

    ``{"sm": "1rem", "md": "1rem"}`` becomes ``"1rem"``; maps with differing
    values are kept. Values are compared literally, so "0" and "0px"
    differ. Each attribute is handled independently.
    """
    changes: dict[str, Any] = {}
    for f in fields(variant):
        value = getattr(variant, f.name)
        if not isinstance(value, dict) or not value:
            continue
        values = list(value.values())
        if all(v == values[0] for v in values):
            changes[f.name] = values[0]
    return replace(variant, **changes)


def add_variant(
    variants: dict[str, Variant],
    style_name: str,
    values: dict[str, Any],
    factory: type[Variant],
) -> None:
    """Record one styled node's values under its style name.

    A breakpoint suffix ("page/sm") writes every attribute into a
    per-breakpoint map of the base variant ("page"). Without a suffix the
    variant is assigned as a whole.
    """
    base, _, breakpoint = style_name.rpartition(BREAKPOINT_SEPARATOR)
    if not base or not breakpoint:
        variants[style_name] = factory(**values)
        return

    variant = variants.get(base) or factory()
    for name, value in values.items():
        current = getattr(variant, name)
        responsive = dict(current) if isinstance(current, dict) else {}
        responsive[breakpoint] = value
        setattr(variant, name, responsive)
    variants[base] = variant


def _style_names(styles: dict[str, Style], style_type: StyleType) -> dict[str, str]:
    return {key: s.name for key, s in styles.items() if s.style_type is style_type}


def get_grid_styles(
    canvas: FigmaNode,
    styles: dict[str, Style],
    base: float = DEFAULT_BASE_FONT_SIZE,
) -> dict[str, GridVariant]:
    """Grid variants from frames using a grid style.

    Only stretching column grids are supported; styled frames with any
    other grid are skipped.
    """
    grid_styles = _style_names(styles, StyleType.GRID)

    variants: dict[str, GridVariant] = {}
    for frame in find_frames(canvas):
        style_key = frame.styles.get("grid")
        if style_key not in grid_styles:
            continue

        layout_grid = next((g for g in frame.layout_grids if g.is_stretch_columns), None)
        if layout_grid is None:
            continue

        values = {
            "columns": layout_grid.count,
            "gutter": to_rem(layout_grid.gutter_size, base),
            "margin": to_rem(layout_grid.offset, base),
        }
        add_variant(variants, grid_styles[style_key], values, GridVariant)

    logger.debug(f"Extracted {len(variants)} grid styles")
    return {name: flatten_variant(v) for name, v in variants.items()}


def text_style_values(style: TypeStyle, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """CSS values of a text node's style, keyed by TextVariant attribute."""
    return {
        "font_family": style.font_family,
        "font_size": to_rem(style.font_size, base),
        "font_style": "italic" if style.italic else "normal",
        "font_weight": format_number(style.font_weight),
        "letter_spacing": letter_spacing_to_em(style.letter_spacing, style.font_size),
        "line_height": line_height_value(style, base),
        "text_decoration_line": text_decoration_value(style),
        "text_transform": text_transform_value(style),
    }


def get_text_styles(
    canvas: FigmaNode,
    styles: dict[str, Style],
    base: float = DEFAULT_BASE_FONT_SIZE,
) -> dict[str, TextVariant]:
    """Text variants from text elements using a text style."""
    text_styles = _style_names(styles, StyleType.TEXT)

    variants: dict[str, TextVariant] = {}
    for text in find_texts(canvas):
        style_key = text.styles.get("text")
        if style_key not in text_styles or text.style is None:
            continue
        add_variant(
            variants, text_styles[style_key], text_style_values(text.style, base), TextVariant
        )

    logger.debug(f"Extracted {len(variants)} text styles")
    return {name: flatten_variant(v) for name, v in variants.items()}
