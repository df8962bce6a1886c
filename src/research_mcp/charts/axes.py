"""Frame, axis lines and labels shared by the price and financial charts."""

from collections.abc import Sequence

from research_mcp.charts.scale import AxisScale, PlotArea
from research_mcp.charts.scene import LegendEntry, Line, Text
from research_mcp.utils.formatting import format_number

CHART_AREA = PlotArea(width=420, height=180, padding=30)
CHART_STYLE = (
    "width:100%;max-width:100%;background:#0f0e17;"
    "border:1px solid var(--border);border-radius:8px;"
)
MARKER_RADIUS = 3
# x-axis runs slightly past the last sample
AXIS_OVERHANG = 10
# Legend row above the plot; label width is estimated per character
LEGEND_CHAR_WIDTH = 6
LEGEND_GAP = 14


def axis_lines(area: PlotArea) -> tuple[Line, Line]:
    """Vertical y-axis and horizontal x-axis along the plotting rectangle."""
    return (
        Line(area.padding, area.padding, area.padding, area.baseline),
        Line(area.padding, area.baseline, area.width - area.padding + AXIS_OVERHANG, area.baseline),
    )


def y_tick_labels(scale: AxisScale) -> tuple[Text, ...]:
    """Right-aligned tick labels left of the y-axis, one per distinct tick."""
    x = scale.area.padding - 6
    return tuple(
        Text(x=x, y=scale.y(tick) + 4, text=str(format_number(tick)), anchor="end")
        for tick in dict.fromkeys(scale.ticks)
    )


def x_labels(scale: AxisScale, labels: Sequence[str], offset: float) -> tuple[Text, ...]:
    """Centered labels under each sample, ``offset`` above the bottom edge."""
    y = scale.area.height - offset
    return tuple(Text(x=scale.x(i), y=y, text=label) for i, label in enumerate(labels))


def legend_labels(entries: Sequence[LegendEntry], area: PlotArea) -> tuple[Text, ...]:
    """Series names in their line colors, left to right above the plot."""
    labels = []
    x = area.padding
    for entry in entries:
        labels.append(Text(x=x, y=area.padding - 12, text=entry.label, anchor="start", fill=entry.color))
        x += len(entry.label) * LEGEND_CHAR_WIDTH + LEGEND_GAP
    return tuple(labels)
