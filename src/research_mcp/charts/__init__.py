"""Chart rendering: scale engine, scene graph and SVG renderers."""

from research_mcp.charts.financial_chart import PALETTE, palette_color, render_financial_chart
from research_mcp.charts.price_chart import PriceSource, price_chart_source, render_price_chart
from research_mcp.charts.scale import AxisScale, EmptySeriesError, PlotArea, build_scale
from research_mcp.charts.scene import LegendEntry, RenderedChart, Scene, Tooltip
from research_mcp.charts.sparkline import render_sparkline

__all__ = [
    "PALETTE",
    "palette_color",
    "render_financial_chart",
    "PriceSource",
    "price_chart_source",
    "render_price_chart",
    "AxisScale",
    "EmptySeriesError",
    "PlotArea",
    "build_scale",
    "LegendEntry",
    "RenderedChart",
    "Scene",
    "Tooltip",
    "render_sparkline",
]
