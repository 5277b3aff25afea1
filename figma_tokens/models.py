"""Data models for the Figma document tree.

This module defines typed views over the JSON returned by the Figma REST
API (``GET /v1/files/:key``). Only the attributes used for token
extraction are modelled; everything else in the payload is ignored.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeType(Enum):
    """Kinds of nodes in a Figma document."""

    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"  # A page
    FRAME = "FRAME"
    GROUP = "GROUP"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"  # May carry overrides inconsistent with its component
    VECTOR = "VECTOR"
    OTHER = "OTHER"

    @classmethod
    def _missing_(cls, value: object) -> "NodeType":
        return cls.OTHER


class StyleType(Enum):
    """Kinds of shared styles in the file's style registry."""

    FILL = "FILL"
    EFFECT = "EFFECT"
    GRID = "GRID"
    TEXT = "TEXT"


class EffectType(Enum):
    """Kinds of node effects."""

    DROP_SHADOW = "DROP_SHADOW"
    INNER_SHADOW = "INNER_SHADOW"
    LAYER_BLUR = "LAYER_BLUR"
    BACKGROUND_BLUR = "BACKGROUND_BLUR"
    OTHER = "OTHER"

    @classmethod
    def _missing_(cls, value: object) -> "EffectType":
        return cls.OTHER


class LineHeightUnit(Enum):
    """Units a text node's line height can be declared in."""

    PIXELS = "PIXELS"
    FONT_SIZE_PERCENT = "FONT_SIZE_%"
    INTRINSIC_PERCENT = "INTRINSIC_%"
    OTHER = "OTHER"

    @classmethod
    def _missing_(cls, value: object) -> "LineHeightUnit":
        return cls.OTHER


@dataclass
class Color:
    """An RGBA color with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        """Create from dictionary."""
        return cls(
            r=data.get("r", 0.0),
            g=data.get("g", 0.0),
            b=data.get("b", 0.0),
            a=data.get("a", 1.0),
        )


@dataclass
class BoundingBox:
    """Absolute position and size of a node, in pixels."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoundingBox":
        """Create from dictionary."""
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            width=data.get("width", 0.0),
            height=data.get("height", 0.0),
        )


@dataclass
class Paint:
    """A fill applied to a node. Only solid paints carry a color."""

    type: str
    color: Color | None = None
    visible: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Paint":
        """Create from dictionary."""
        color = data.get("color")
        return cls(
            type=data.get("type", "SOLID"),
            color=Color.from_dict(color) if color else None,
            visible=data.get("visible", True),
        )


@dataclass
class Effect:
    """A visual effect (shadow or blur) applied to a node."""

    type: EffectType
    color: Color | None = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    radius: float = 0.0
    spread: float | None = None
    visible: bool = True

    @property
    def is_shadow(self) -> bool:
        """Check if this effect is a drop or inner shadow."""
        return self.type in (EffectType.DROP_SHADOW, EffectType.INNER_SHADOW)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Effect":
        """Create from dictionary."""
        color = data.get("color")
        offset = data.get("offset") or {}
        return cls(
            type=EffectType(data["type"]),
            color=Color.from_dict(color) if color else None,
            offset_x=offset.get("x", 0.0),
            offset_y=offset.get("y", 0.0),
            radius=data.get("radius", 0.0),
            spread=data.get("spread"),
            visible=data.get("visible", True),
        )


@dataclass
class LayoutGrid:
    """A layout grid applied to a frame."""

    pattern: str  # COLUMNS | ROWS | GRID
    alignment: str | None = None  # MIN | MAX | CENTER | STRETCH
    count: int = 0
    gutter_size: float = 0.0
    offset: float = 0.0
    section_size: float = 0.0

    @property
    def is_stretch_columns(self) -> bool:
        """Check if this is a column grid stretching across the frame."""
        return self.pattern == "COLUMNS" and self.alignment == "STRETCH"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutGrid":
        """Create from dictionary."""
        return cls(
            pattern=data.get("pattern", ""),
            alignment=data.get("alignment"),
            count=data.get("count", 0),
            gutter_size=data.get("gutterSize", 0.0),
            offset=data.get("offset", 0.0),
            section_size=data.get("sectionSize", 0.0),
        )


@dataclass
class TypeStyle:
    """Resolved typography attributes of a text node."""

    font_family: str = ""
    font_size: float = 0.0
    font_weight: float = 400
    italic: bool = False
    letter_spacing: float = 0.0
    line_height_px: float = 0.0
    line_height_percent_font_size: float | None = None
    line_height_unit: LineHeightUnit | None = None
    text_case: str | None = None  # UPPER | LOWER | TITLE | ORIGINAL
    text_decoration: str | None = None  # UNDERLINE | STRIKETHROUGH | NONE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeStyle":
        """Create from dictionary."""
        unit = data.get("lineHeightUnit")
        return cls(
            font_family=data.get("fontFamily", ""),
            font_size=data.get("fontSize", 0.0),
            font_weight=data.get("fontWeight", 400),
            italic=data.get("italic", False),
            letter_spacing=data.get("letterSpacing", 0.0),
            line_height_px=data.get("lineHeightPx", 0.0),
            line_height_percent_font_size=data.get("lineHeightPercentFontSize"),
            line_height_unit=LineHeightUnit(unit) if unit else None,
            text_case=data.get("textCase"),
            text_decoration=data.get("textDecoration"),
        )


@dataclass
class FigmaNode:
    """A node of the document tree.

    Nodes reference shared styles by role (``fill``, ``effect``, ``grid``,
    ``text``) through ``styles`` rather than embedding the style values.
    """

    id: str
    name: str
    type: NodeType
    children: list["FigmaNode"] = field(default_factory=list)
    absolute_bounding_box: BoundingBox = field(default_factory=BoundingBox)
    corner_radius: float | None = None
    fills: list[Paint] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)
    styles: dict[str, str] = field(default_factory=dict)
    layout_grids: list[LayoutGrid] = field(default_factory=list)
    style: TypeStyle | None = None
    raw_type: str | None = None  # Original type string for NodeType.OTHER

    @property
    def has_children(self) -> bool:
        """Check if this node owns child nodes."""
        return len(self.children) > 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FigmaNode":
        """Create from a Figma REST API node payload (recursively)."""
        bbox = data.get("absoluteBoundingBox")
        style = data.get("style")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            type=NodeType(data.get("type")),
            children=[cls.from_dict(c) for c in data.get("children", [])],
            absolute_bounding_box=(
                BoundingBox.from_dict(bbox) if bbox else BoundingBox()
            ),
            corner_radius=data.get("cornerRadius"),
            fills=[Paint.from_dict(p) for p in data.get("fills", [])],
            effects=[Effect.from_dict(e) for e in data.get("effects", [])],
            styles=dict(data.get("styles") or {}),
            layout_grids=[LayoutGrid.from_dict(g) for g in data.get("layoutGrids", [])],
            style=TypeStyle.from_dict(style) if style else None,
            raw_type=data.get("type"),
        )


@dataclass
class Style:
    """Metadata of a shared style in the file's style registry."""

    key: str
    name: str
    style_type: StyleType
    description: str = ""

    @classmethod
    def from_dict(cls, key: str, data: dict[str, Any]) -> "Style":
        """Create from a style registry entry."""
        return cls(
            key=key,
            name=data.get("name", ""),
            style_type=StyleType(data["styleType"]),
            description=data.get("description", ""),
        )


@dataclass
class FigmaFile:
    """A fetched Figma file: the document tree plus its style registry."""

    document: FigmaNode
    styles: dict[str, Style] = field(default_factory=dict)
    name: str = ""
    version: str | None = None
    last_modified: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FigmaFile":
        """Create from a ``GET /v1/files/:key`` response body."""
        return cls(
            document=FigmaNode.from_dict(data["document"]),
            styles={
                key: Style.from_dict(key, value)
                for key, value in (data.get("styles") or {}).items()
            },
            name=data.get("name", ""),
            version=data.get("version"),
            last_modified=data.get("lastModified"),
        )
