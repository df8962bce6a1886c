"""Company content tool."""

from time import perf_counter
from typing import Any

from research_mcp.data.store import CompanyNotFoundError, ContentStore, get_store
from research_mcp.utils.normalize import (
    FinancialsShape,
    PricesShape,
    detect_financials_shape,
    detect_prices_shape,
    normalize_content,
)
from research_mcp.utils.provenance import build_error_response, build_meta, build_provenance
from research_mcp.utils.summary import resolve_summary
from research_mcp.utils.validators import CompanyParams


def _format_warnings(document: Any) -> list[str]:
    """Note fields that were read from a legacy or unrecognized shape."""
    if not isinstance(document, dict):
        return ["document: unrecognized shape, read as empty"]
    warnings = []
    fin_shape = detect_financials_shape(document.get("financials"))
    if fin_shape is FinancialsShape.LEGACY:
        warnings.append("financials: legacy metric/value pairs")
    elif fin_shape is FinancialsShape.DEFAULT and document.get("financials") is not None:
        warnings.append("financials: unrecognized shape, read as empty table")
    price_shape = detect_prices_shape(document.get("prices"))
    if price_shape is PricesShape.LEGACY:
        warnings.append("prices: legacy number list")
    elif price_shape is PricesShape.DEFAULT and document.get("prices") is not None:
        warnings.append("prices: unrecognized shape, read as empty series")
    return warnings


def company_content(company_id: str, store: ContentStore | None = None) -> dict[str, Any]:
    """
    Get a company's canonical content.

    Args:
        company_id: Company id

    Returns:
        Dict with company, canonical content payload and effective summary
    """
    start_time = perf_counter()
    store = store or get_store()

    try:
        params = CompanyParams(company_id=company_id)
        company = store.get_company(params.company_id)
        document = store.get_document(params.company_id)
    except ValueError as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)
    except CompanyNotFoundError:
        return build_error_response("not_found", f"Company not found: {company_id}", company_id=company_id)

    content = normalize_content(document)
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("company_content", duration_ms),
        "data_provenance": {
            "content": build_provenance(
                source="content_store",
                uri=params.to_uri(),
                warnings=_format_warnings(document),
            ),
        },
        "company": company.as_dict(),
        "content": content.to_payload(),
        "effective_summary": resolve_summary(company.name, content),
        "summary_source": "manual" if content.has_manual_summary else "synthesized",
    }
