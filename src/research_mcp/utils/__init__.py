"""Utility modules."""

from research_mcp.utils.formatting import PLACEHOLDER, format_cell, format_number, format_tooltip
from research_mcp.utils.normalize import (
    FinancialsShape,
    PricesShape,
    canonical_dumps,
    coerce_number,
    detect_financials_shape,
    detect_prices_shape,
    is_numeric,
    normalize_content,
    normalize_financials,
    normalize_news,
    normalize_prices,
)
from research_mcp.utils.provenance import build_error_response, build_meta, build_provenance
from research_mcp.utils.sanitize import parse_news_text, sanitize_text
from research_mcp.utils.summary import MAX_SUMMARY_WORDS, resolve_summary, synthesize_summary
from research_mcp.utils.validators import CompanyParams, slugify_company_id

__all__ = [
    "PLACEHOLDER",
    "format_cell",
    "format_number",
    "format_tooltip",
    "FinancialsShape",
    "PricesShape",
    "canonical_dumps",
    "coerce_number",
    "detect_financials_shape",
    "detect_prices_shape",
    "is_numeric",
    "normalize_content",
    "normalize_financials",
    "normalize_news",
    "normalize_prices",
    "build_error_response",
    "build_meta",
    "build_provenance",
    "parse_news_text",
    "sanitize_text",
    "MAX_SUMMARY_WORDS",
    "resolve_summary",
    "synthesize_summary",
    "CompanyParams",
    "slugify_company_id",
]
