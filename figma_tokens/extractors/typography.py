"""Extraction of typography scales from the "Typography" page.

Each value is authored as a sample text element named with a prefix, e.g. a
text "fontSize-lg" set in 20px type. Values are read from the text node's
own style, not from shared text styles.
"""

from ..errors import MissingFontsError
from ..models import FigmaNode, TypeStyle
from ..reporter import ErrorReporter
from ..tokens_logging import get_logger
from ..tree import find_texts
from ..units import DEFAULT_BASE_FONT_SIZE, letter_spacing_to_em, line_height_value, to_rem
from .scales import build_scale

logger = get_logger("extractors")

FONT_PREFIX = "font-"
FONT_SIZE_PREFIX = "fontSize-"
LINE_HEIGHT_PREFIX = "lineHeight-"
LETTER_SPACING_PREFIX = "letterSpacing-"

REQUIRED_FONTS = ("body", "heading")


def _text_styles(canvas: FigmaNode, prefix: str) -> list[tuple[str, TypeStyle]]:
    return [
        (node.name[len(prefix):], node.style or TypeStyle())
        for node in find_texts(canvas)
        if node.name.startswith(prefix)
    ]


def get_font_families(
    canvas: FigmaNode, reporter: ErrorReporter | None = None
) -> dict[str, str]:
    """Font families from text elements named "font-*".

    Raises:
        MissingFontsError: If the "body" or "heading" font is missing. Each
            missing font is reported before raising.
    """
    # TODO: Support font stacks (e.g. "Roboto, Arial, sans-serif")
    fonts = {name: style.font_family for name, style in _text_styles(canvas, FONT_PREFIX)}

    missing = [role for role in REQUIRED_FONTS if role not in fonts]
    if missing:
        reporter = reporter or ErrorReporter()
        for role in missing:
            reporter.report(
                f'{role.capitalize()} font not found in "Typography" page',
                f'- Please add a text element named "{FONT_PREFIX}{role}".',
            )
        raise MissingFontsError(missing, prefix=FONT_PREFIX)

    logger.debug(f"Extracted {len(fonts)} fonts")
    return fonts


def get_font_sizes(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Font sizes from text elements named "fontSize-*", smallest first."""
    sizes = build_scale(
        [n for n in find_texts(canvas) if n.style is not None],
        FONT_SIZE_PREFIX,
        lambda n: n.style.font_size,
        lambda px: to_rem(px, base),
    )
    logger.debug(f"Extracted {len(sizes)} font sizes")
    return sizes


def get_line_heights(canvas: FigmaNode, base: float = DEFAULT_BASE_FONT_SIZE) -> dict[str, str]:
    """Line heights from text elements named "lineHeight-*"."""
    line_heights = {
        name: line_height_value(style, base)
        for name, style in _text_styles(canvas, LINE_HEIGHT_PREFIX)
    }
    logger.debug(f"Extracted {len(line_heights)} line heights")
    return line_heights


def get_letter_spacing(canvas: FigmaNode) -> dict[str, str]:
    """Letter spacing, as a fraction of the font size, from "letterSpacing-*" texts."""
    ratios = [
        (name, style.letter_spacing / style.font_size if style.font_size else 0.0, style)
        for name, style in _text_styles(canvas, LETTER_SPACING_PREFIX)
    ]
    ratios.sort(key=lambda item: item[1])
    spacing = {
        name: letter_spacing_to_em(style.letter_spacing, style.font_size)
        for name, _, style in ratios
    }
    logger.debug(f"Extracted {len(spacing)} letter spacings")
    return spacing
