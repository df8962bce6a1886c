"""Content and chart resource handlers."""

from research_mcp.charts.financial_chart import render_financial_chart
from research_mcp.charts.price_chart import render_price_chart
from research_mcp.charts.sparkline import render_sparkline
from research_mcp.data.store import CompanyNotFoundError, ContentStore, get_store
from research_mcp.utils.normalize import canonical_dumps
from research_mcp.utils.validators import CompanyParams, validate_chart_kind


class ResourceNotFoundError(Exception):
    """Resource not found in the store."""

    pass


def read_content_resource(company_id: str, store: ContentStore | None = None) -> tuple[str, str]:
    """
    Serve a company's canonical content document.

    Args:
        company_id: Company id

    Returns:
        Tuple of (json_text, mime_type)

    Raises:
        ResourceNotFoundError: If the company has no document
    """
    store = store or get_store()
    params = CompanyParams(company_id=company_id)
    try:
        content = store.get_content(params.company_id)
    except CompanyNotFoundError:
        raise ResourceNotFoundError(f"No content stored: {params.to_uri()}") from None

    return canonical_dumps(content.to_payload()), "application/json"


def read_chart_resource(
    company_id: str,
    kind: str,
    store: ContentStore | None = None,
) -> tuple[str, str]:
    """
    Serve one rendered chart as markup.

    Empty series render as an HTML placeholder instead of SVG.

    Args:
        company_id: Company id
        kind: price, financials or sparkline

    Returns:
        Tuple of (markup, mime_type)

    Raises:
        ResourceNotFoundError: If the company has no document
        ValueError: If the chart kind is unknown
    """
    store = store or get_store()
    params = CompanyParams(company_id=company_id)
    kind = validate_chart_kind(kind)
    try:
        content = store.get_content(params.company_id)
    except CompanyNotFoundError:
        raise ResourceNotFoundError(f"No content stored: {params.to_uri()}") from None

    if kind == "price":
        chart = render_price_chart(content.prices)
    elif kind == "financials":
        chart = render_financial_chart(content.financials)
    else:
        chart = render_sparkline([p.value for p in content.prices])

    mime_type = "text/html" if chart.empty else "image/svg+xml"
    return chart.markup, mime_type
