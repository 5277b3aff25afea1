"""Extraction of tokens defined as shared styles: colours and shadows.

Only nodes that reference a shared style are considered; a swatch with a
local, unstyled fill or effect is ignored. The token name comes from the
style name, not from the node.
"""

from typing import Any

from ..models import FigmaNode, Style, StyleType
from ..tokens import Palette, count_leaves
from ..tokens_logging import get_logger
from ..tree import find_swatches
from ..units import shadows_to_css, to_hex

logger = get_logger("extractors")

COLOUR_PREFIX = "custom/"
SHADOW_PREFIX = "shadow-"
PATH_SEPARATOR = "/"


def styles_by_prefix(
    styles: dict[str, Style], style_type: StyleType, prefix: str
) -> dict[str, str]:
    """Map style ids to their prefix-stripped names for one kind of style."""
    return {
        key: style.name[len(prefix):]
        for key, style in styles.items()
        if style.style_type is style_type and style.name.startswith(prefix)
    }


def set_path(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Set ``value`` in nested dicts along ``path``, creating levels as needed.

    A scalar found where a level is needed is replaced by a new dict.
    """
    node = target
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[path[-1]] = value


def get_colours(canvas: FigmaNode, styles: dict[str, Style]) -> Palette:
    """Colours from swatches filled with a "custom/*" colour style.

    Slashes in the style name nest the palette: "custom/brand/primary"
    becomes ``{"brand": {"primary": "#..."}}``.
    """
    colour_styles = styles_by_prefix(styles, StyleType.FILL, COLOUR_PREFIX)

    palette: Palette = {}
    for node in find_swatches(canvas):
        fill_key = node.styles.get("fill")
        if fill_key not in colour_styles:
            continue
        if not node.fills or node.fills[0].color is None:
            continue

        path = colour_styles[fill_key].split(PATH_SEPARATOR)
        set_path(palette, path, to_hex(node.fills[0].color))

    logger.debug(f"Extracted {count_leaves(palette)} colours")
    return palette


def get_shadows(canvas: FigmaNode, styles: dict[str, Style]) -> dict[str, str]:
    """Box shadows from swatches using a "shadow-*" effect style."""
    shadow_styles = styles_by_prefix(styles, StyleType.EFFECT, SHADOW_PREFIX)

    shadows: dict[str, str] = {}
    for node in find_swatches(canvas):
        effect_key = node.styles.get("effect")
        if effect_key not in shadow_styles:
            continue

        value = shadows_to_css(node.effects)
        if value:
            shadows[shadow_styles[effect_key]] = value

    logger.debug(f"Extracted {len(shadows)} shadows")
    return shadows
