"""Company dashboard: summary, charts, financial table and news."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from time import perf_counter
from types import MappingProxyType
from typing import Any

from research_mcp.charts.financial_chart import render_financial_chart
from research_mcp.charts.markup import html_list, html_table
from research_mcp.charts.price_chart import PriceSource, price_chart_source, render_price_chart
from research_mcp.charts.scene import RenderedChart
from research_mcp.charts.sparkline import render_sparkline
from research_mcp.data.store import CompanyNotFoundError, ContentStore, get_store
from research_mcp.models import Company, CompanyContent, FinancialTable
from research_mcp.utils.formatting import format_cell
from research_mcp.utils.provenance import build_error_response, build_meta
from research_mcp.utils.summary import resolve_summary
from research_mcp.utils.validators import CompanyParams

NO_FINANCIALS = "No financials"


@dataclass(frozen=True)
class DashboardContext:
    """
    Read-only snapshot of loaded companies, keyed by company id.

    Rendering takes its content from here instead of a shared cache;
    build a new context to pick up writes.
    """

    entries: Mapping[str, tuple[Company, CompanyContent]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_store(cls, store: ContentStore, company_ids: Iterable[str] | None = None) -> DashboardContext:
        if company_ids is None:
            company_ids = [c.id for c in store.list_companies()]
        entries = {}
        for company_id in company_ids:
            entries[company_id] = (store.get_company(company_id), store.get_content(company_id))
        return cls(entries=entries)

    def get(self, company_id: str) -> tuple[Company, CompanyContent]:
        try:
            return self.entries[company_id]
        except KeyError:
            raise CompanyNotFoundError(company_id) from None


@dataclass(frozen=True)
class CompanyDashboard:
    company: Company
    summary: str
    summary_source: str
    price_source: PriceSource
    price_chart: RenderedChart | None
    sparkline: RenderedChart
    financial_table: str
    financial_chart: RenderedChart
    news: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "company": self.company.as_dict(),
            "summary": self.summary,
            "summary_source": self.summary_source,
            "price": {
                "source": self.price_source.as_dict(),
                "chart": self.price_chart.as_dict() if self.price_chart else None,
                "sparkline": self.sparkline.as_dict(),
            },
            "financials": {
                "table": self.financial_table,
                "chart": self.financial_chart.as_dict(),
            },
            "news": self.news,
        }


def render_financial_table(table: FinancialTable) -> str:
    """Formatted table; missing cells show the placeholder."""
    rows = [[format_cell(row.get(col)) for col in table.columns] for row in table.rows]
    return html_table(table.columns, rows, css_class="fin-table", empty_text=NO_FINANCIALS)


def render_news(news: Iterable[str]) -> str:
    return html_list(list(news), css_class="news-list")


def render_company(context: DashboardContext, company_id: str) -> CompanyDashboard:
    """
    Render every panel for one company from the context.

    The manual price chart is rendered only for private series; public
    tickers are shown through the embed in ``price_source``.

    Raises:
        CompanyNotFoundError: If the company is not in the context
    """
    company, content = context.get(company_id)
    source = price_chart_source(content)

    return CompanyDashboard(
        company=company,
        summary=resolve_summary(company.name, content),
        summary_source="manual" if content.has_manual_summary else "synthesized",
        price_source=source,
        price_chart=render_price_chart(content.prices) if source.kind == "private" else None,
        sparkline=render_sparkline([p.value for p in content.prices]),
        financial_table=render_financial_table(content.financials),
        financial_chart=render_financial_chart(content.financials),
        news=render_news(content.news),
    )


def company_dashboard(company_id: str, store: ContentStore | None = None) -> dict[str, Any]:
    """
    Render the full dashboard for a company.

    Args:
        company_id: Company id

    Returns:
        Dict with summary, price source and charts, financial table and chart, news list
    """
    start_time = perf_counter()
    store = store or get_store()

    try:
        params = CompanyParams(company_id=company_id)
        context = DashboardContext.from_store(store, [params.company_id])
    except ValueError as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)
    except CompanyNotFoundError:
        return build_error_response("not_found", f"Company not found: {company_id}", company_id=company_id)

    dashboard = render_company(context, params.company_id)
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("company_dashboard", duration_ms),
        **dashboard.as_dict(),
    }
