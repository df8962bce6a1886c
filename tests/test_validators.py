"""Tests for validators and CompanyParams."""

import pytest

from research_mcp.utils.validators import (
    VALID_CHART_KINDS,
    VALID_SECTIONS,
    CompanyParams,
    slugify_company_id,
    validate_chart_kind,
    validate_section,
)


class TestSlugify:
    """Tests for slugify_company_id."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Citadel", "citadel"),
            ("  HRT  ", "hrt"),
            ("Jane Street", "jane-street"),
            ("a  &  b", "a-b"),
            ("flow_traders-2", "flow_traders-2"),
            (None, ""),
        ],
    )
    def test_slugify(self, raw, expected) -> None:
        assert slugify_company_id(raw) == expected


class TestCompanyParams:
    """Tests for CompanyParams dataclass."""

    def test_id_normalization(self) -> None:
        """Test id is slugified."""
        params = CompanyParams(company_id="Virtu Financial")
        assert params.company_id == "virtu-financial"

    def test_empty_id_raises(self) -> None:
        with pytest.raises(ValueError, match="Company id required"):
            CompanyParams(company_id="   ")

    def test_name_sanitized(self) -> None:
        """Test control characters are stripped from the name."""
        params = CompanyParams(company_id="drw", name=" DRW\x00\n ")
        assert params.name == "DRW"

    def test_require_name(self) -> None:
        with pytest.raises(ValueError, match="Company name required"):
            CompanyParams(company_id="drw").require_name()
        CompanyParams(company_id="drw", name="DRW").require_name()

    def test_params_immutable(self) -> None:
        """Test CompanyParams is frozen."""
        params = CompanyParams(company_id="drw")
        with pytest.raises(AttributeError):
            params.company_id = "other"  # type: ignore

    def test_to_uri(self) -> None:
        assert CompanyParams(company_id="Jane").to_uri() == "content://jane"


class TestSectionAndChartKind:
    """Tests for section and chart kind validation."""

    def test_all_valid_sections(self) -> None:
        for section in VALID_SECTIONS:
            assert validate_section(section.upper()) == section

    def test_invalid_section(self) -> None:
        with pytest.raises(ValueError, match="Invalid section"):
            validate_section("summary")

    def test_all_valid_chart_kinds(self) -> None:
        for kind in VALID_CHART_KINDS:
            assert validate_chart_kind(f" {kind} ") == kind

    def test_invalid_chart_kind(self) -> None:
        with pytest.raises(ValueError, match="Invalid chart"):
            validate_chart_kind("candles")
