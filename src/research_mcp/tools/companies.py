"""Company directory tools."""

from time import perf_counter
from typing import Any

from research_mcp.data.store import (
    CompanyExistsError,
    CompanyNotFoundError,
    ContentStore,
    get_store,
)
from research_mcp.models import DEFAULT_FINANCIAL_COLUMNS
from research_mcp.utils.normalize import normalize_content
from research_mcp.utils.provenance import build_error_response, build_meta
from research_mcp.utils.sanitize import sanitize_text
from research_mcp.utils.validators import CompanyParams


def list_companies(store: ContentStore | None = None) -> dict[str, Any]:
    """
    List all companies ordered by name.

    Returns:
        Dict with companies (id, name) and count
    """
    start_time = perf_counter()
    store = store or get_store()
    companies = [c.as_dict() for c in store.list_companies()]
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("list_companies", duration_ms),
        "companies": companies,
        "count": len(companies),
    }


def create_company(
    company_id: str,
    name: str,
    ticker: str = "",
    price_private: bool = False,
    overview: str = "",
    store: ContentStore | None = None,
) -> dict[str, Any]:
    """
    Create a company with an initial document.

    The initial document has an empty financial table with the default
    columns, no prices and no news.

    Args:
        company_id: Requested id (slugified)
        name: Display name
        ticker: Public ticker (only used when price_private is False)
        price_private: Whether the price chart uses a manual series
        overview: Long-form description

    Returns:
        Dict with the created company, its id and the updated company list
    """
    start_time = perf_counter()
    store = store or get_store()

    try:
        params = CompanyParams(company_id=company_id, name=name)
        params.require_name()
    except ValueError as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)

    document = normalize_content(
        {
            "overview": overview,
            "financials": {"columns": list(DEFAULT_FINANCIAL_COLUMNS), "rows": []},
            "pricePrivate": price_private,
            "ticker": sanitize_text(ticker, max_length=40) or "",
        }
    ).to_payload()

    try:
        company = store.create_company(params, document)
    except CompanyExistsError as e:
        return build_error_response("conflict", str(e), company_id=params.company_id)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "meta": build_meta("create_company", duration_ms),
        "id": company.id,
        "company": company.as_dict(),
        "companies": [c.as_dict() for c in store.list_companies()],
    }


def rename_company(
    company_id: str,
    name: str,
    store: ContentStore | None = None,
) -> dict[str, Any]:
    """Rename a company. Returns the updated company list."""
    start_time = perf_counter()
    store = store or get_store()

    try:
        params = CompanyParams(company_id=company_id, name=name)
        company = store.rename_company(params)
    except ValueError as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)
    except CompanyNotFoundError:
        return build_error_response("not_found", f"Company not found: {company_id}", company_id=company_id)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "meta": build_meta("rename_company", duration_ms),
        "company": company.as_dict(),
        "companies": [c.as_dict() for c in store.list_companies()],
    }
