"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from research_mcp.data.seed import SEED_COMPANIES
from research_mcp.data.store import ContentStore
from research_mcp.models import CompanyContent
from research_mcp.utils.normalize import normalize_content


@pytest.fixture
def current_document() -> dict[str, Any]:
    """Stored document in the current shapes."""
    return {
        "overview": "Global market maker;\n  equities/options/fixed income.",
        "summary": "",
        "prices": [
            {"date": "2024-01", "value": 32},
            {"date": "2024-02", "value": "34"},
            {"date": "2024-03", "value": 36},
        ],
        "financials": {
            "columns": ["date", "revenue", "ebitda"],
            "rows": [
                {"date": "2024-12-31", "revenue": 6200, "ebitda": 2852},
                {"date": "2023-12-31", "revenue": 5100, "ebitda": 2100},
            ],
        },
        "news": ["Expanding APAC options franchise."],
        "pricePrivate": True,
        "ticker": "",
    }


@pytest.fixture
def legacy_document() -> dict[str, Any]:
    """Stored document in the legacy shapes."""
    return {
        "overview": "Multi-asset liquidity provider.",
        "prices": [22, 23, 25, 26, 25],
        "financials": [["Revenue", "$3.8bn"], ["EBITDA", "$1.4bn"]],
        "news": ["Hiring in digital assets MM."],
        "pricePrivate": False,
        "ticker": "JANE:PRIVATE",
    }


@pytest.fixture
def current_content(current_document: dict[str, Any]) -> CompanyContent:
    return normalize_content(current_document)


@pytest.fixture
def store(tmp_path) -> ContentStore:
    """Empty store in a temporary directory."""
    content_store = ContentStore(str(tmp_path / "content"))
    yield content_store
    content_store.close()


@pytest.fixture
def seeded_store(store: ContentStore) -> ContentStore:
    """Store holding the demo firms."""
    store.seed(SEED_COMPANIES)
    return store
