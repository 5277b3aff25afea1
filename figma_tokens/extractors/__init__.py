"""Per-category design token extractors.

Each extractor reads one page of the Figma file (and, where tokens are
defined as shared styles, the file's style registry) and returns one token
category:
- scales.py: breakpoints, radii, sizes, spacing
- styles.py: colours, shadows
- typography.py: fonts, font sizes, line heights, letter spacing
- variants.py: grid and text variants
- icons.py: custom SVG icons
"""

from .icons import get_icons
from .scales import get_breakpoints, get_radii, get_sizes, get_spacing
from .styles import get_colours, get_shadows
from .typography import (
    get_font_families,
    get_font_sizes,
    get_letter_spacing,
    get_line_heights,
)
from .variants import flatten_variant, get_grid_styles, get_text_styles

__all__ = [
    "get_breakpoints",
    "get_colours",
    "get_font_families",
    "get_font_sizes",
    "get_grid_styles",
    "get_icons",
    "get_letter_spacing",
    "get_line_heights",
    "get_radii",
    "get_shadows",
    "get_sizes",
    "get_spacing",
    "get_text_styles",
    "flatten_variant",
]
