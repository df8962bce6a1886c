"""Tests for the company content tool."""

import json

from research_mcp.models import PAYLOAD_FIELDS
from research_mcp.tools.content import company_content
from research_mcp.utils.validators import CompanyParams


class TestCompanyContent:
    """Tests for company_content tool."""

    def test_response_structure(self, seeded_store) -> None:
        result = company_content("citadel", store=seeded_store)

        assert result["meta"]["tool"] == "company_content"
        assert result["company"] == {"id": "citadel", "name": "Citadel Securities"}
        assert tuple(result["content"]) == PAYLOAD_FIELDS
        assert result["data_provenance"]["content"]["source"] == "content_store"
        assert result["data_provenance"]["content"]["uri"] == "content://citadel"

    def test_legacy_shapes_warned(self, seeded_store) -> None:
        """Seeded prices are legacy numbers."""
        result = company_content("citadel", store=seeded_store)
        assert result["data_provenance"]["content"]["warnings"] == ["prices: legacy number list"]

    def test_legacy_financials_converted(self, store, legacy_document) -> None:
        store.create_company(CompanyParams(company_id="jane", name="Jane Street"), legacy_document)
        result = company_content("jane", store=store)

        assert result["content"]["financials"] == {
            "columns": ["metric", "value"],
            "rows": [
                {"metric": "Revenue", "value": "$3.8bn"},
                {"metric": "EBITDA", "value": "$1.4bn"},
            ],
        }
        assert "financials: legacy metric/value pairs" in result["data_provenance"]["content"]["warnings"]

    def test_unrecognized_shapes_warned(self, store) -> None:
        store.create_company(
            CompanyParams(company_id="odd", name="Odd"),
            {"financials": "n/a", "prices": {"value": 1}},
        )
        result = company_content("odd", store=store)

        assert result["content"]["prices"] == []
        assert result["content"]["financials"]["columns"] == ["date", "revenue", "ebitda"]
        assert len(result["data_provenance"]["content"]["warnings"]) == 2

    def test_current_document_no_warnings(self, store, current_document) -> None:
        store.create_company(CompanyParams(company_id="citadel", name="Citadel"), current_document)
        result = company_content("citadel", store=store)
        assert result["data_provenance"]["content"]["warnings"] == []

    def test_synthesized_summary(self, seeded_store) -> None:
        result = company_content("citadel", store=seeded_store)

        assert result["summary_source"] == "synthesized"
        assert result["effective_summary"].startswith("Citadel Securities operates")
        assert "Recent revenue: 6,200." in result["effective_summary"]

    def test_manual_summary(self, store, current_document) -> None:
        current_document["summary"] = "Manual."
        store.create_company(CompanyParams(company_id="citadel", name="Citadel"), current_document)
        result = company_content("citadel", store=store)

        assert result["summary_source"] == "manual"
        assert result["effective_summary"] == "Manual."

    def test_not_found(self, store) -> None:
        result = company_content("ghost", store=store)

        assert result["error"] is True
        assert result["error_type"] == "not_found"

    def test_json_serializable(self, seeded_store) -> None:
        """Test response can be serialized to JSON."""
        result = company_content("virtu", store=seeded_store)
        json.dumps(result, default=str)
