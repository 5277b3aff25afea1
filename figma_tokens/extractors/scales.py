"""Extraction of numeric scales: breakpoints, radii, sizes and spacing.

Each token is drawn on its page as a swatch named with a fixed prefix,
e.g. a rectangle "breakpoint-md" 768px wide. Scales are emitted in
ascending order of their pixel value.
"""

from collections.abc import Callable

from ..models import FigmaNode
from ..tokens_logging import get_logger
from ..tree import find_components, find_swatches
from ..units import DEFAULT_BASE_FONT_SIZE, to_em, to_rem

logger = get_logger("extractors")

BREAKPOINT_PREFIX = "breakpoint-"
RADII_PREFIX = "radii-"
SIZE_PREFIX = "size-"
SPACE_PREFIX = "space-"


def build_scale(
    nodes: list[FigmaNode],
    prefix: str,
    measure: Callable[[FigmaNode], float],
    render: Callable[[float], str],
) -> dict[str, str]:
    """Build an ascending name -> value scale from prefixed nodes.

    Args:
        nodes: Candidate nodes.
        prefix: Name prefix a node must carry; stripped from the token name.
        measure: Reads the pixel value used for sorting.
        render: Converts the pixel value to the emitted CSS value.

    Returns:
        Token names mapped to values, in ascending order of pixel value.
    """
    matched = [(n.name[len(prefix):], measure(n)) for n in nodes if n.name.startswith(prefix)]
    matched.sort(key=lambda item: item[1])
    return {name: render(value) for name, value in matched}


def get_breakpoints(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Breakpoints from the width of rectangles and frames named "breakpoint-*"."""
    breakpoints = build_scale(
        find_swatches(canvas),
        BREAKPOINT_PREFIX,
        lambda n: n.absolute_bounding_box.width,
        lambda px: to_em(px, base),
    )
    logger.debug(f"Extracted {len(breakpoints)} breakpoints")
    return breakpoints


def get_radii(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Border radii from the corner radius of swatches named "radii-*"."""
    radii = build_scale(
        find_swatches(canvas),
        RADII_PREFIX,
        lambda n: n.corner_radius or 0,
        lambda px: to_rem(px, base) if px else "0",
    )
    logger.debug(f"Extracted {len(radii)} radii")
    return radii


def get_sizes(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Sizes from the width of swatches named "size-*"."""
    sizes = build_scale(
        find_swatches(canvas),
        SIZE_PREFIX,
        lambda n: n.absolute_bounding_box.width,
        lambda px: to_rem(px, base),
    )
    logger.debug(f"Extracted {len(sizes)} sizes")
    return sizes


def get_spacing(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Spacing from the height of components named "space-*".

    Spacing swatches are vertical gaps, so the height is measured.
    """
    spacing = build_scale(
        find_components(canvas),
        SPACE_PREFIX,
        lambda n: n.absolute_bounding_box.height,
        lambda px: to_rem(px, base),
    )
    logger.debug(f"Extracted {len(spacing)} spacing values")
    return spacing
