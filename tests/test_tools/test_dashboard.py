"""Tests for the company dashboard."""

import json

import pytest

from research_mcp.data.store import CompanyNotFoundError
from research_mcp.models import FinancialTable
from research_mcp.tools.companies import create_company
from research_mcp.tools.edit import replace_company_content
from research_mcp.tools.dashboard import (
    DashboardContext,
    company_dashboard,
    render_company,
    render_financial_table,
    render_news,
)
from research_mcp.utils.formatting import PLACEHOLDER
from research_mcp.utils.validators import CompanyParams


class TestDashboardContext:
    """Tests for DashboardContext snapshots."""

    def test_loads_every_company(self, seeded_store) -> None:
        context = DashboardContext.from_store(seeded_store)
        assert set(context.entries) == {"citadel", "jane", "hrt", "drw", "virtu", "flow"}

    def test_unknown_company(self, seeded_store) -> None:
        context = DashboardContext.from_store(seeded_store, ["citadel"])
        with pytest.raises(CompanyNotFoundError):
            context.get("jane")

    def test_read_only(self, seeded_store) -> None:
        context = DashboardContext.from_store(seeded_store, ["citadel"])
        with pytest.raises(TypeError):
            context.entries["x"] = None  # type: ignore

    def test_snapshot_ignores_later_writes(self, seeded_store) -> None:
        context = DashboardContext.from_store(seeded_store, ["citadel"])
        seeded_store.rename_company(CompanyParams(company_id="citadel", name="Renamed"))

        company, _ = context.get("citadel")
        assert company.name == "Citadel Securities"


class TestRenderCompany:
    """Tests for render_company function."""

    def test_private_series(self, seeded_store) -> None:
        dashboard = render_company(DashboardContext.from_store(seeded_store), "citadel")

        assert dashboard.price_source.kind == "private"
        assert dashboard.price_chart is not None
        assert dashboard.price_chart.tooltips[0].text == "Price: 32 (p1)"
        assert not dashboard.sparkline.empty
        assert [e.label for e in dashboard.financial_chart.legend] == ["revenue", "ebitda"]
        assert dashboard.news == '<ul class="news-list"><li>Expanding APAC options franchise.</li></ul>'

    def test_public_ticker(self, seeded_store) -> None:
        dashboard = render_company(DashboardContext.from_store(seeded_store), "virtu")

        assert dashboard.price_source.kind == "public"
        assert "VIRT%3ANASDAQ" in dashboard.price_source.embed_url
        assert dashboard.price_chart is None

    def test_new_company_renders_empty_panels(self, store) -> None:
        create_company("acme", "Acme", store=store)
        dashboard = render_company(DashboardContext.from_store(store), "acme")

        assert dashboard.price_source.kind == "unset"
        assert dashboard.sparkline.empty
        assert dashboard.financial_chart.empty
        assert "No financials" in dashboard.financial_table
        assert dashboard.news == '<ul class="news-list"></ul>'
        assert dashboard.summary_source == "synthesized"


class TestPanels:
    """Tests for table and news fragments."""

    def test_financial_table_formats_cells(self) -> None:
        table = FinancialTable(rows=({"date": "2024-12-31", "revenue": 6200},))
        markup = render_financial_table(table)

        assert "<td>6,200</td>" in markup
        assert f"<td>{PLACEHOLDER}</td>" in markup

    def test_news_escaped(self) -> None:
        assert render_news(["<b>M&A</b>"]) == '<ul class="news-list"><li>&lt;b&gt;M&amp;A&lt;/b&gt;</li></ul>'


class TestCompanyDashboard:
    """Tests for company_dashboard tool."""

    def test_response_structure(self, seeded_store) -> None:
        result = company_dashboard("citadel", store=seeded_store)

        assert result["meta"]["tool"] == "company_dashboard"
        assert result["company"]["id"] == "citadel"
        assert set(result["price"]) == {"source", "chart", "sparkline"}
        assert set(result["financials"]) == {"table", "chart"}
        assert result["financials"]["chart"]["tooltips"][0] == "revenue: 6,200 (2024-12-31)"

    def test_id_is_normalized(self, seeded_store) -> None:
        assert company_dashboard(" CITADEL ", store=seeded_store)["company"]["id"] == "citadel"

    def test_not_found(self, seeded_store) -> None:
        result = company_dashboard("ghost", store=seeded_store)
        assert result["error_type"] == "not_found"

    def test_json_serializable(self, seeded_store) -> None:
        json.dumps(company_dashboard("virtu", store=seeded_store), default=str)

    def test_malformed_cells_still_render(self, store) -> None:
        """A saved document with odd cells keeps rendering."""
        create_company("acme", "Acme", store=store)
        document = {
            "financials": {
                "columns": ["date", "revenue"],
                "rows": [{"date": ["Q1", "Q2"], "revenue": 5}, {"date": "Q3", "revenue": 10**400}],
            },
            "prices": [{"date": "a", "value": 10**400}, {"date": " ", "value": 2}],
        }
        assert replace_company_content("acme", document, store=store)["ok"] is True

        result = company_dashboard("acme", store=store)

        assert "error" not in result
        assert result["financials"]["chart"]["tooltips"] == ["revenue: 5 (['Q1', 'Q2'])", "revenue: 0 (Q3)"]
        assert f"<td>{10**400:,}</td>" in result["financials"]["table"]
