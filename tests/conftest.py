"""
Shared fixtures for the token importer test suite.

Provides test fixtures for:
- Building Figma node payloads
- A complete sample Figma file with every token page
- Mock Figma client and SVG optimizer
"""

import io
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from figma_tokens.models import FigmaFile, FigmaNode
from figma_tokens.reporter import ErrorReporter
from figma_tokens.svg import OptimizedSVG

# ---------------------------------------------------------------------------
# Node payload builders
# ---------------------------------------------------------------------------

_ids = iter(range(1, 1_000_000))


def node(
    node_type: str,
    name: str,
    children: list[dict[str, Any]] | None = None,
    width: float = 0,
    height: float = 0,
    **attrs: Any,
) -> dict[str, Any]:
    """Build a node payload the way the Figma REST API returns it."""
    data: dict[str, Any] = {
        "id": attrs.pop("id", f"1:{next(_ids)}"),
        "name": name,
        "type": node_type,
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": width, "height": height},
    }
    if children is not None:
        data["children"] = children
    data.update(attrs)
    return data


def text(name: str, **style: Any) -> dict[str, Any]:
    """Build a TEXT node payload with a type style."""
    styles = style.pop("styles", None)
    type_style = {
        "fontFamily": "Inter",
        "fontSize": 16,
        "fontWeight": 400,
        "letterSpacing": 0,
        "lineHeightPx": 24,
        "lineHeightUnit": "PIXELS",
    }
    type_style.update(style)
    extra = {"styles": styles} if styles else {}
    return node("TEXT", name, style=type_style, **extra)


def canvas(name: str, children: list[dict[str, Any]], **attrs: Any) -> dict[str, Any]:
    return node("CANVAS", name, children=children, **attrs)


def color(r: float, g: float, b: float, a: float = 1.0) -> dict[str, float]:
    return {"r": r, "g": g, "b": b, "a": a}


def column_grid(count: int, gutter: float, offset: float) -> dict[str, Any]:
    return {
        "pattern": "COLUMNS",
        "alignment": "STRETCH",
        "count": count,
        "gutterSize": gutter,
        "offset": offset,
    }


@pytest.fixture
def make_node() -> Callable[..., FigmaNode]:
    """Factory building a FigmaNode from node payload arguments."""

    def _make(node_type: str, name: str = "", children=None, **attrs) -> FigmaNode:
        return FigmaNode.from_dict(node(node_type, name, children=children, **attrs))

    return _make


@pytest.fixture
def make_canvas() -> Callable[..., FigmaNode]:
    """Factory building a CANVAS FigmaNode from child payloads."""

    def _make(*children: dict[str, Any], name: str = "Page") -> FigmaNode:
        return FigmaNode.from_dict(canvas(name, list(children)))

    return _make


# ---------------------------------------------------------------------------
# Sample file
# ---------------------------------------------------------------------------


@pytest.fixture
def styles_data() -> dict[str, Any]:
    """Style registry of the sample file."""
    return {
        "S:1": {"name": "custom/brand/primary", "styleType": "FILL"},
        "S:2": {"name": "custom/white", "styleType": "FILL"},
        "S:3": {"name": "legacy/grey", "styleType": "FILL"},
        "E:1": {"name": "shadow-md", "styleType": "EFFECT"},
        "G:1": {"name": "page/sm", "styleType": "GRID"},
        "G:2": {"name": "page/md", "styleType": "GRID"},
        "T:1": {"name": "body/sm", "styleType": "TEXT"},
        "T:2": {"name": "body/md", "styleType": "TEXT"},
        "T:3": {"name": "caption", "styleType": "TEXT"},
    }


@pytest.fixture
def file_data(styles_data: dict[str, Any]) -> dict[str, Any]:
    """A complete Figma file payload with every token page."""
    pages = [
        canvas(
            "📐 Breakpoints",
            [
                node("RECTANGLE", "breakpoint-lg", width=960),
                node("RECTANGLE", "breakpoint-sm", width=480),
                node(
                    "FRAME",
                    "Frame",
                    children=[node("FRAME", "breakpoint-md", width=768, children=[])],
                ),
                node(
                    "INSTANCE",
                    "Example",
                    children=[node("RECTANGLE", "breakpoint-xl", width=1280)],
                ),
            ],
        ),
        canvas(
            "🎨 Colours",
            [
                node(
                    "RECTANGLE",
                    "Primary",
                    fills=[{"type": "SOLID", "color": color(1, 0, 0)}],
                    styles={"fill": "S:1"},
                ),
                node(
                    "FRAME",
                    "White",
                    children=[],
                    fills=[{"type": "SOLID", "color": color(1, 1, 1)}],
                    styles={"fill": "S:2"},
                ),
                node(
                    "RECTANGLE",
                    "Grey",
                    fills=[{"type": "SOLID", "color": color(0.5, 0.5, 0.5)}],
                    styles={"fill": "S:3"},
                ),
                node(
                    "RECTANGLE",
                    "Unstyled",
                    fills=[{"type": "SOLID", "color": color(0, 0, 1)}],
                ),
            ],
        ),
        canvas(
            "Grids",
            [
                node(
                    "FRAME",
                    "Small",
                    children=[],
                    styles={"grid": "G:1"},
                    layoutGrids=[column_grid(4, 16, 16)],
                ),
                node(
                    "FRAME",
                    "Medium",
                    children=[],
                    styles={"grid": "G:2"},
                    layoutGrids=[column_grid(8, 16, 32)],
                ),
            ],
        ),
        canvas(
            "Icons",
            [
                node("COMPONENT", "icon/custom/close", id="10:1", children=[]),
                node("COMPONENT", "icon/custom/arrow-left", id="10:2", children=[]),
                node("COMPONENT", "icon/other/logo", id="10:3", children=[]),
            ],
        ),
        canvas(
            "Radii",
            [
                node("RECTANGLE", "radii-lg", cornerRadius=8),
                node("RECTANGLE", "radii-none"),
                node("RECTANGLE", "radii-sm", cornerRadius=4),
            ],
        ),
        canvas(
            "Shadows",
            [
                node(
                    "RECTANGLE",
                    "Medium",
                    styles={"effect": "E:1"},
                    effects=[
                        {
                            "type": "DROP_SHADOW",
                            "color": color(0, 0, 0, 0.25),
                            "offset": {"x": 0, "y": 4},
                            "radius": 8,
                        },
                        {
                            "type": "INNER_SHADOW",
                            "color": color(0, 0, 0, 0.1),
                            "offset": {"x": 0, "y": 0},
                            "radius": 2,
                            "spread": 1,
                        },
                    ],
                ),
            ],
        ),
        canvas(
            "Sizes",
            [
                node("RECTANGLE", "size-lg", width=64),
                node("RECTANGLE", "size-hairline", width=1),
                node("RECTANGLE", "size-sm", width=16),
            ],
        ),
        canvas(
            "Spacing",
            [
                node("COMPONENT", "space-md", width=100, height=16, children=[]),
                node("COMPONENT", "space-xs", width=100, height=4, children=[]),
                node("RECTANGLE", "space-ignored", height=2),
            ],
        ),
        canvas(
            "Typography",
            [
                text("font-body", fontFamily="Inter"),
                text("font-heading", fontFamily="Playfair Display"),
                text("fontSize-lg", fontSize=20),
                text("fontSize-sm", fontSize=14),
                text("lineHeight-tight", lineHeightPx=20, lineHeightUnit="PIXELS"),
                text("lineHeight-normal", lineHeightUnit="INTRINSIC_%"),
                text("letterSpacing-wide", letterSpacing=0.8, fontSize=16),
                text("letterSpacing-none", letterSpacing=0, fontSize=16),
                text("Body small", fontSize=16, styles={"text": "T:1"}),
                text("Body medium", fontSize=18, styles={"text": "T:2"}),
            ],
        ),
    ]
    return {
        "name": "Design System",
        "version": "123",
        "lastModified": "2024-01-01T00:00:00Z",
        "document": node("DOCUMENT", "Document", children=pages),
        "styles": styles_data,
    }


@pytest.fixture
def figma_file(file_data: dict[str, Any]) -> FigmaFile:
    """The sample file parsed into models."""
    return FigmaFile.from_dict(file_data)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def reporter() -> ErrorReporter:
    """Error reporter writing to a throwaway stream without colors."""
    return ErrorReporter(use_color=False, stream=io.StringIO())


@pytest.fixture
def mock_client(figma_file: FigmaFile) -> MagicMock:
    """Mock Figma client rendering every requested node."""
    client = MagicMock()
    client.get_file = AsyncMock(return_value=figma_file)
    client.get_images = AsyncMock(
        side_effect=lambda file_key, ids, **kwargs: {
            node_id: f"https://images.example/{node_id}.svg" for node_id in ids
        }
    )
    client.fetch_text = AsyncMock(
        side_effect=lambda url: f'<svg xmlns="http://www.w3.org/2000/svg"><!-- {url} --></svg>'
    )
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_optimizer() -> MagicMock:
    """Mock SVG optimizer echoing its input."""
    optimizer = MagicMock()
    optimizer.optimize.side_effect = lambda markup: OptimizedSVG(data=markup)
    return optimizer
