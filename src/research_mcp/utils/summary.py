"""Short company summaries derived from stored content."""

from typing import Any

from research_mcp.models import CompanyContent
from research_mcp.utils.formatting import format_number

MAX_SUMMARY_WORDS = 150
DEFAULT_COMPANY_NAME = "The company"

FIRM_SENTENCE = "{name} operates as a multi-asset trading and market-making firm."
REGIONS_SENTENCE = "Key regions: Americas, EMEA, and APAC."
PRODUCTS_SENTENCE = "Focus products: equities, ETFs, options, FX, and digital assets."


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _first_row_metric(content: CompanyContent, needle: str) -> Any:
    """Value of the first column containing ``needle`` in the first row, or None."""
    table = content.financials
    col = table.find_column(needle)
    if col is None or not table.rows:
        return None
    value = table.rows[0].get(col)
    return None if _is_blank(value) else value


def truncate_words(text: str, limit: int = MAX_SUMMARY_WORDS) -> str:
    """Keep the first ``limit`` whitespace-delimited words."""
    return " ".join(text.split()[:limit])


def synthesize_summary(company_name: str | None, content: CompanyContent) -> str:
    """
    Compose a summary when no manual one is stored.

    Order is fixed: firm sentence, overview, public marker, revenue,
    EBITDA, regions, products. The result never exceeds 150 words.

    Args:
        company_name: Display name (falls back to "The company")
        content: Normalized company content

    Returns:
        Deterministic summary text
    """
    name = (company_name or "").strip() or DEFAULT_COMPANY_NAME
    overview = " ".join(content.overview.split())

    parts = [FIRM_SENTENCE.format(name=name)]
    if overview:
        parts.append(overview)
    if content.ticker:
        parts.append(f"Public marker: {content.ticker}.")

    revenue = _first_row_metric(content, "revenue")
    if revenue is not None:
        parts.append(f"Recent revenue: {format_number(revenue)}.")
    ebitda = _first_row_metric(content, "ebitda")
    if ebitda is not None:
        parts.append(f"EBITDA: {format_number(ebitda)}.")

    parts.append(REGIONS_SENTENCE)
    parts.append(PRODUCTS_SENTENCE)

    return truncate_words(" ".join(parts))


def resolve_summary(company_name: str | None, content: CompanyContent) -> str:
    """Stored manual summary if present, else a synthesized one."""
    if content.has_manual_summary:
        return content.summary.strip()
    return synthesize_summary(company_name, content)
