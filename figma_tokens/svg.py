"""SVG optimization for imported icons, backed by scour."""

from dataclasses import dataclass
from xml.parsers.expat import ExpatError

from scour import scour


@dataclass
class OptimizedSVG:
    """Outcome of optimizing one SVG: either ``data`` or an ``error``."""

    data: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None


class SVGOptimizer:
    """Minifies SVG markup rendered by Figma.

    Strips metadata, comments and the XML prolog, shortens ids and collapses
    redundant groups while keeping the viewBox so icons stay scalable.
    """

    def __init__(self, precision: int = 5):
        options = scour.sanitizeOptions()
        options.digits = precision
        options.strip_comments = True
        options.strip_xml_prolog = True
        options.remove_metadata = True
        options.remove_descriptive_elements = True
        options.shorten_ids = True
        options.group_collapse = True
        options.enable_viewboxing = False
        options.indent_type = "none"
        options.newlines = False
        self.options = options

    def optimize(self, markup: str) -> OptimizedSVG:
        """Optimize SVG markup. Invalid markup is returned as an error."""
        if not markup.strip():
            return OptimizedSVG(error="Empty SVG document")
        try:
            return OptimizedSVG(data=scour.scourString(markup, self.options).strip())
        except (ExpatError, ValueError) as e:
            return OptimizedSVG(error=str(e))
