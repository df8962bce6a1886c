"""Serialize scenes and panel fragments to markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence

from research_mcp.charts.scene import Circle, Line, LinearGradient, Polyline, Scene, Text

SVG_NS = "http://www.w3.org/2000/svg"


def fmt_coord(value: float) -> str:
    """Compact coordinate text: at most 2 decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def points_attr(points: Iterable[tuple[float, float]]) -> str:
    return " ".join(f"{fmt_coord(x)},{fmt_coord(y)}" for x, y in points)


def _gradient(parent: ET.Element, grad: LinearGradient) -> None:
    el = ET.SubElement(parent, "linearGradient", {"id": grad.id, "x1": "0", "x2": "0", "y1": "0", "y2": "1"})
    ET.SubElement(
        el,
        "stop",
        {"offset": "0%", "stop-color": grad.color, "stop-opacity": fmt_coord(grad.top_opacity)},
    )
    ET.SubElement(
        el,
        "stop",
        {"offset": "100%", "stop-color": grad.color, "stop-opacity": fmt_coord(grad.bottom_opacity)},
    )


def _shape(parent: ET.Element, shape) -> None:
    if isinstance(shape, Line):
        ET.SubElement(
            parent,
            "line",
            {
                "x1": fmt_coord(shape.x1),
                "y1": fmt_coord(shape.y1),
                "x2": fmt_coord(shape.x2),
                "y2": fmt_coord(shape.y2),
                "stroke": shape.stroke,
            },
        )
    elif isinstance(shape, Polyline):
        attrs = {"fill": shape.fill, "stroke": shape.stroke}
        if shape.stroke_width is not None:
            attrs["stroke-width"] = fmt_coord(shape.stroke_width)
        attrs["points"] = points_attr(shape.points)
        ET.SubElement(parent, "polyline", attrs)
    elif isinstance(shape, Circle):
        attrs = {
            "cx": fmt_coord(shape.cx),
            "cy": fmt_coord(shape.cy),
            "r": fmt_coord(shape.r),
            "fill": shape.fill,
        }
        if shape.tooltip is not None:
            attrs["data-tip"] = shape.tooltip
        el = ET.SubElement(parent, "circle", attrs)
        if shape.title is not None:
            ET.SubElement(el, "title").text = shape.title
    elif isinstance(shape, Text):
        el = ET.SubElement(
            parent,
            "text",
            {
                "x": fmt_coord(shape.x),
                "y": fmt_coord(shape.y),
                "fill": shape.fill,
                "font-size": str(shape.font_size),
                "text-anchor": shape.anchor,
            },
        )
        el.text = shape.text
    else:
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def to_svg(scene: Scene) -> str:
    """Render a scene as a standalone ``<svg>`` element."""
    area = scene.area
    attrs = {
        "xmlns": SVG_NS,
        "viewBox": f"0 0 {fmt_coord(area.width)} {fmt_coord(area.height)}",
        "class": scene.css_class,
    }
    if scene.preserve_aspect_ratio:
        attrs["preserveAspectRatio"] = scene.preserve_aspect_ratio
    if scene.style:
        attrs["style"] = scene.style
    root = ET.Element("svg", attrs)

    if scene.defs:
        defs = ET.SubElement(root, "defs")
        for grad in scene.defs:
            _gradient(defs, grad)

    for shape in scene.elements:
        _shape(root, shape)

    return ET.tostring(root, encoding="unicode")


def placeholder(message: str, css_class: str = "chart-empty") -> str:
    """Muted "no data" block shown instead of an empty chart."""
    el = ET.Element("div", {"class": css_class})
    el.text = message
    return ET.tostring(el, encoding="unicode")


def html_list(items: Sequence[str], css_class: str) -> str:
    """``<ul>`` with one ``<li>`` per item. No items gives an empty container."""
    ul = ET.Element("ul", {"class": css_class})
    for item in items:
        ET.SubElement(ul, "li").text = item
    return ET.tostring(ul, encoding="unicode", short_empty_elements=False)


def html_table(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    css_class: str,
    empty_text: str,
) -> str:
    """Table with a header row; a single muted row spans all columns when empty."""
    table = ET.Element("table", {"class": css_class})
    head_row = ET.SubElement(ET.SubElement(table, "thead"), "tr")
    for name in header:
        ET.SubElement(head_row, "th").text = name

    body = ET.SubElement(table, "tbody")
    if rows:
        for cells in rows:
            tr = ET.SubElement(body, "tr")
            for cell in cells:
                ET.SubElement(tr, "td").text = cell
    else:
        td = ET.SubElement(ET.SubElement(body, "tr"), "td", {"colspan": str(max(1, len(header)))})
        td.text = empty_text

    return ET.tostring(table, encoding="unicode", short_empty_elements=False)
