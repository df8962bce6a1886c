"""Price chart for a manual price series."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import quote

from research_mcp.charts.axes import (
    CHART_AREA,
    CHART_STYLE,
    MARKER_RADIUS,
    axis_lines,
    x_labels,
    y_tick_labels,
)
from research_mcp.charts.markup import placeholder, to_svg
from research_mcp.charts.scale import build_scale
from research_mcp.charts.scene import Circle, Polyline, RenderedChart, Scene, Tooltip
from research_mcp.models import CompanyContent, PricePoint
from research_mcp.utils.formatting import format_number, format_tooltip

PRICE_COLOR = "#e34f4f"
PRICE_LABEL = "Price"
NO_PRICES = "No price points"
TICKER_HINT = "Set a ticker to display a public chart (e.g. NASDAQ:VIRT)."
EMBED_URL = (
    "https://s.tradingview.com/embed-widget/mini-symbol-overview/"
    "?symbol={symbol}&locale=en&dateRange=12M&colorTheme=dark&trendLineColor=%23e34f4f"
)


@dataclass(frozen=True)
class PriceSource:
    """
    Where the price panel gets its data.

    kind is "private" (manual series), "public" (ticker feed embed) or
    "unset" (public but no ticker yet).
    """

    kind: str
    ticker: str = ""
    embed_url: str | None = None
    message: str = ""

    def as_dict(self) -> dict:
        return {
            "kind": self.kind,
            "ticker": self.ticker,
            "embed_url": self.embed_url,
            "message": self.message,
        }


def price_chart_source(content: CompanyContent) -> PriceSource:
    """Decide between the manual series and the public ticker feed."""
    if content.price_private:
        return PriceSource(kind="private", message="Private: showing manual series.")
    if not content.ticker:
        return PriceSource(kind="unset", message=TICKER_HINT)
    return PriceSource(
        kind="public",
        ticker=content.ticker,
        embed_url=EMBED_URL.format(symbol=quote(content.ticker, safe="")),
        message=f"Public ticker: {content.ticker}",
    )


def build_price_scene(points: Sequence[PricePoint]) -> tuple[Scene, tuple[Tooltip, ...]]:
    """Scene and tooltips for a non-empty price series."""
    area = CHART_AREA
    values = [p.value for p in points]
    scale = build_scale(values, len(values), area)
    coords = [scale.point(i, v) for i, v in enumerate(values)]

    tooltips = tuple(
        Tooltip(
            label=PRICE_LABEL,
            value=p.value,
            date=p.date,
            text=format_tooltip(PRICE_LABEL, p.value, p.date),
            x=x,
            y=y,
        )
        for p, (x, y) in zip(points, coords)
    )
    markers = tuple(
        Circle(
            cx=t.x,
            cy=t.y,
            r=MARKER_RADIUS,
            fill=PRICE_COLOR,
            tooltip=t.text,
            title=str(format_number(t.value)),
        )
        for t in tooltips
    )

    scene = Scene(
        area=area,
        css_class="chart chart-price",
        style=CHART_STYLE,
        elements=(
            *axis_lines(area),
            *y_tick_labels(scale),
            *x_labels(scale, [p.date for p in points], offset=6),
            Polyline(points=tuple(coords), stroke=PRICE_COLOR, stroke_width=2),
            *markers,
        ),
    )
    return scene, tooltips


def render_price_chart(points: Sequence[PricePoint]) -> RenderedChart:
    """Render a normalized price series, or a "no data" placeholder."""
    if not points:
        return RenderedChart(kind="price", markup=placeholder(NO_PRICES), empty=True)

    scene, tooltips = build_price_scene(points)
    return RenderedChart(kind="price", markup=to_svg(scene), scene=scene, tooltips=tooltips)
