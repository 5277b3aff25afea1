"""Unit and color conversions from Figma values to CSS values.

Lengths come out of Figma in pixels. Scales are emitted in relative units
(``rem`` for most tokens, ``em`` for breakpoints so media queries follow the
user's font size). Values of 1px or less stay in pixels: hairlines should
not scale with the font size.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from .models import Color, Effect, EffectType, LineHeightUnit, TypeStyle

DEFAULT_BASE_FONT_SIZE = 16.0


def format_number(value: float) -> str:
    """Render a number without a redundant fractional part (30.0 -> "30")."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _relative(px: float, unit: str, base: float) -> str:
    if px <= 1:
        return f"{format_number(px)}px"
    return f"{format_number(px / base)}{unit}"


def to_rem(px: float, base: float = DEFAULT_BASE_FONT_SIZE) -> str:
    """Convert pixels to a length relative to the root font size.

    >>> to_rem(24)
    '1.5rem'
    >>> to_rem(1)
    '1px'
    """
    return _relative(px, "rem", base)


def to_em(px: float, base: float = DEFAULT_BASE_FONT_SIZE) -> str:
    """Convert pixels to a length relative to the element font size.

    >>> to_em(480)
    '30em'
    """
    return _relative(px, "em", base)


def px_or_zero(value: float | None) -> str:
    """Render a pixel length, using a bare "0" for zero."""
    if not value:
        return "0"
    return f"{format_number(value)}px"


def round_half_up(value: float, digits: int) -> float:
    """Round to `digits` decimals with ties away from zero (0.0625 -> 0.063).

    >>> round_half_up(0.125, 2)
    0.13
    """
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def _round_channel(channel: float) -> int:
    # Half rounds up, not to even
    return int(math.floor(channel * 255 + 0.5))


def to_hex(color: Color) -> str:
    """Convert a float RGB color to a lowercase hex string. Alpha is dropped."""
    r, g, b = (_round_channel(c) for c in (color.r, color.g, color.b))
    return f"#{r:02x}{g:02x}{b:02x}"


def to_rgba(color: Color) -> str:
    """Convert a float RGBA color to a CSS ``rgba()`` value."""
    r, g, b = (_round_channel(c) for c in (color.r, color.g, color.b))
    a = format_number(round_half_up(color.a, 2))
    return f"rgba({r}, {g}, {b}, {a})"


def shadow_to_css(shadow: Effect) -> str:
    """Convert a single shadow effect to a CSS ``box-shadow`` value."""
    inset = "inset " if shadow.type is EffectType.INNER_SHADOW else ""
    color = to_rgba(shadow.color or Color(0.0, 0.0, 0.0, 0.0))

    x = px_or_zero(shadow.offset_x)
    y = px_or_zero(shadow.offset_y)
    radius = px_or_zero(shadow.radius)
    spread = px_or_zero(shadow.spread)

    return f"{inset}{x} {y} {radius} {spread} {color}"


def shadows_to_css(effects: list[Effect]) -> str:
    """Convert all shadow effects of a node to one CSS ``box-shadow`` value.

    Figma lists effects top to bottom as shown in the layer panel, whereas
    CSS paints the first shadow on top, so the order is reversed.
    """
    shadows = [shadow_to_css(e) for e in effects if e.is_shadow]
    return ", ".join(reversed(shadows))


def letter_spacing_to_em(letter_spacing: float, font_size: float) -> str:
    """Express letter spacing as a fraction of the font size.

    >>> letter_spacing_to_em(-0.32, 16)
    '-0.02em'
    >>> letter_spacing_to_em(0, 16)
    '0'
    """
    ratio = round_half_up(letter_spacing / font_size, 3) if font_size else 0.0
    if ratio == 0:
        return "0"
    return f"{format_number(ratio)}em"


def line_height_value(style: TypeStyle, base: float = DEFAULT_BASE_FONT_SIZE) -> str:
    """Resolve a text style's line height to a CSS value.

    Pixel line heights become relative lengths, percentages of the font
    size become unitless ratios and intrinsic line heights become "normal".
    Anything else yields an empty string.
    """
    unit = style.line_height_unit
    if unit is LineHeightUnit.PIXELS:
        return to_rem(style.line_height_px, base)
    if unit is LineHeightUnit.FONT_SIZE_PERCENT:
        return format_number((style.line_height_percent_font_size or 0) / 100)
    if unit is LineHeightUnit.INTRINSIC_PERCENT:
        return "normal"
    return ""


_TEXT_DECORATIONS = {
    "UNDERLINE": "underline",
    "STRIKETHROUGH": "line-through",
}

_TEXT_TRANSFORMS = {
    "UPPER": "uppercase",
    "LOWER": "lowercase",
    "TITLE": "capitalize",
}


def text_decoration_value(style: TypeStyle) -> str:
    """CSS ``text-decoration-line`` for a text style."""
    return _TEXT_DECORATIONS.get(style.text_decoration or "", "none")


def text_transform_value(style: TypeStyle) -> str:
    """CSS ``text-transform`` for a text style."""
    return _TEXT_TRANSFORMS.get(style.text_case or "", "none")
