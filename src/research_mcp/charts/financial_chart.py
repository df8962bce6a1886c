"""Multi-series line chart over a financial table."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from research_mcp.charts.axes import (
    CHART_AREA,
    CHART_STYLE,
    MARKER_RADIUS,
    axis_lines,
    legend_labels,
    x_labels,
    y_tick_labels,
)
from research_mcp.charts.markup import placeholder, to_svg
from research_mcp.charts.scale import build_scale
from research_mcp.charts.scene import (
    Circle,
    LegendEntry,
    Polyline,
    RenderedChart,
    Scene,
    Tooltip,
)
from research_mcp.models import FinancialTable
from research_mcp.utils.formatting import format_number, format_tooltip
from research_mcp.utils.normalize import coerce_number, is_numeric

# Colors repeat after five series; the legend does not disambiguate repeats.
PALETTE: tuple[str, ...] = ("#e34f4f", "#6ce3a6", "#6fa7ff", "#f5c84c", "#c17dff")
NO_FINANCIALS = "Add financial rows to view chart."


def palette_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


@dataclass(frozen=True)
class Series:
    column: str
    values: tuple[float, ...]
    color: str

    @property
    def legend_entry(self) -> LegendEntry:
        return LegendEntry(label=self.column, color=self.color)


def extract_series(table: FinancialTable) -> list[Series]:
    """
    One series per numeric non-date column, in column order.

    A column is numeric if at least one cell holds a number or numeric
    text. Other cells in that column plot as 0.
    """
    frame = table.to_frame()
    series: list[Series] = []
    for col in table.series_columns:
        cells = frame[col]
        if not cells.map(is_numeric).any():
            continue
        values = tuple(float(v) for v in cells.map(coerce_number))
        series.append(Series(column=col, values=values, color=palette_color(len(series))))
    return series


def _date_label(value) -> str:
    # Cells may hold lists or objects; only scalars can be missing
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return ""
    return value if isinstance(value, str) else str(value)


def date_labels(table: FinancialTable) -> list[str]:
    """x-axis labels from the date column; blank when there is none."""
    col = table.date_column
    if col is None:
        return [""] * len(table.rows)
    return [_date_label(v) for v in table.to_frame()[col]]


def build_financial_scene(
    table: FinancialTable,
    series: list[Series],
) -> tuple[Scene, tuple[Tooltip, ...]]:
    """Scene and tooltips. All series share one y-scale; the legend sits above the plot."""
    area = CHART_AREA
    dates = date_labels(table)
    domain = [v for s in series for v in s.values]
    scale = build_scale(domain, len(table.rows), area)

    lines = []
    markers = []
    tooltips = []
    for s in series:
        coords = tuple(scale.point(i, v) for i, v in enumerate(s.values))
        lines.append(Polyline(points=coords, stroke=s.color, stroke_width=2))
        for i, (v, (x, y)) in enumerate(zip(s.values, coords)):
            tip = Tooltip(
                label=s.column,
                value=v,
                date=dates[i],
                text=format_tooltip(s.column, v, dates[i]),
                x=x,
                y=y,
            )
            tooltips.append(tip)
            markers.append(
                Circle(
                    cx=x,
                    cy=y,
                    r=MARKER_RADIUS,
                    fill=s.color,
                    tooltip=tip.text,
                    title=str(format_number(v)),
                )
            )

    scene = Scene(
        area=area,
        css_class="chart chart-fin",
        style=CHART_STYLE,
        elements=(
            *axis_lines(area),
            *y_tick_labels(scale),
            *lines,
            *x_labels(scale, dates, offset=8),
            *legend_labels([s.legend_entry for s in series], area),
            *markers,
        ),
    )
    return scene, tuple(tooltips)


def render_financial_chart(table: FinancialTable) -> RenderedChart:
    """Render every numeric column of ``table`` as a line, or a placeholder."""
    series = extract_series(table) if table.rows else []
    if not series:
        return RenderedChart(kind="financials", markup=placeholder(NO_FINANCIALS), empty=True)

    scene, tooltips = build_financial_scene(table, series)
    legend = tuple(s.legend_entry for s in series)
    return RenderedChart(
        kind="financials",
        markup=to_svg(scene),
        scene=scene,
        tooltips=tooltips,
        legend=legend,
    )
