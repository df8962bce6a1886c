"""Compact single-series area chart without axes."""

from collections.abc import Sequence

from research_mcp.charts.markup import placeholder, to_svg
from research_mcp.charts.scale import PlotArea, build_scale
from research_mcp.charts.scene import LinearGradient, Polyline, RenderedChart, Scene
from research_mcp.utils.normalize import coerce_number

SPARKLINE_AREA = PlotArea(width=240, height=120, padding=0)
FILL_COLOR = "#e34f4f"
LINE_COLOR = "#ff9a9a"
GRADIENT_ID = "sparkline-grad"


def build_sparkline_scene(values: Sequence[float]) -> Scene:
    """Scene for a non-empty series. A single value is drawn as a flat line."""
    series = [coerce_number(v) for v in values]
    if len(series) == 1:
        series = series * 2

    area = SPARKLINE_AREA
    scale = build_scale(series, len(series), area)
    coords = tuple(scale.point(i, v) for i, v in enumerate(series))

    return Scene(
        area=area,
        css_class="sparkline",
        preserve_aspect_ratio="none",
        defs=(LinearGradient(id=GRADIENT_ID, color=FILL_COLOR),),
        elements=(
            Polyline(
                points=coords + ((area.width, area.height), (0.0, area.height)),
                fill=f"url(#{GRADIENT_ID})",
            ),
            Polyline(points=coords, stroke=LINE_COLOR, stroke_width=2),
        ),
    )


def render_sparkline(values: Sequence[float]) -> RenderedChart:
    """Render a bare numeric series as a sparkline."""
    if not values:
        return RenderedChart(kind="sparkline", markup=placeholder("No price points"), empty=True)

    scene = build_sparkline_scene(values)
    return RenderedChart(kind="sparkline", markup=to_svg(scene), scene=scene)
