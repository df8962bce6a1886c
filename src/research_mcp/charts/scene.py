"""Scene graph for vector charts.

Renderers build these shapes from scaled coordinates; ``charts.markup``
turns a Scene into SVG text. Keeping geometry as values lets tests check
coordinates without parsing markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from research_mcp.charts.scale import PlotArea

AXIS_COLOR = "#333"
LABEL_COLOR = "#888"
LABEL_FONT_SIZE = 10


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = AXIS_COLOR


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]
    stroke: str = "none"
    fill: str = "none"
    stroke_width: float | None = None


@dataclass(frozen=True)
class Circle:
    """Data marker. ``tooltip`` becomes the ``data-tip`` attribute."""

    cx: float
    cy: float
    r: float
    fill: str
    tooltip: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    anchor: str = "middle"
    fill: str = LABEL_COLOR
    font_size: int = LABEL_FONT_SIZE


@dataclass(frozen=True)
class LinearGradient:
    """Vertical gradient from ``color`` at the top to transparent at the bottom."""

    id: str
    color: str
    top_opacity: float = 0.8
    bottom_opacity: float = 0.0


Shape = Union[Line, Polyline, Circle, Text]


@dataclass(frozen=True)
class Scene:
    area: PlotArea
    css_class: str
    elements: tuple[Shape, ...] = ()
    defs: tuple[LinearGradient, ...] = ()
    preserve_aspect_ratio: str | None = None
    style: str | None = None

    def shapes(self, kind: type) -> list:
        """All elements of one shape type, in drawing order."""
        return [e for e in self.elements if isinstance(e, kind)]


@dataclass(frozen=True)
class Tooltip:
    """Hover metadata for one marker."""

    label: str
    value: float
    date: str
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str


@dataclass(frozen=True)
class RenderedChart:
    """Renderer output: markup plus the metadata embedded in it."""

    kind: str
    markup: str
    empty: bool = False
    scene: Scene | None = None
    tooltips: tuple[Tooltip, ...] = ()
    legend: tuple[LegendEntry, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict:
        return {
            "kind": self.kind,
            "empty": self.empty,
            "markup": self.markup,
            "tooltips": [t.text for t in self.tooltips],
            "legend": [{"label": e.label, "color": e.color} for e in self.legend],
        }
