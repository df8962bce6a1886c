"""Editor write path: merge one section, then replace the whole document."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from time import perf_counter
from typing import Any

from research_mcp.data.store import CompanyNotFoundError, ContentStore, get_store
from research_mcp.models import CompanyContent
from research_mcp.utils.normalize import (
    normalize_content,
    normalize_financials,
    normalize_news,
    normalize_prices,
)
from research_mcp.utils.provenance import build_error_response, build_meta
from research_mcp.utils.sanitize import parse_news_text, sanitize_text
from research_mcp.utils.validators import CompanyParams, validate_section


@dataclass(frozen=True)
class SectionEdit:
    """
    Values submitted by one editor section.

    Fields left as None keep their stored value.
    """

    section: str
    overview: str | None = None
    summary: str | None = None
    prices: Any = None
    ticker: str | None = None
    price_private: bool | None = None
    financials: Any = None
    news: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "section", validate_section(self.section))


def apply_section_edit(content: CompanyContent, edit: SectionEdit) -> CompanyContent:
    """Return a copy of ``content`` with the edited section merged in."""
    changes: dict[str, Any] = {}

    if edit.section == "overview":
        if edit.summary is not None:
            changes["summary"] = edit.summary.strip()
        if edit.overview is not None:
            changes["overview"] = edit.overview.strip()

    elif edit.section == "prices":
        if edit.prices is not None:
            changes["prices"] = normalize_prices(edit.prices)
        if edit.ticker is not None:
            changes["ticker"] = sanitize_text(edit.ticker, max_length=40) or ""
        if edit.price_private is not None:
            changes["price_private"] = bool(edit.price_private)

    elif edit.section == "financials":
        if edit.financials is not None:
            changes["financials"] = normalize_financials(edit.financials)

    elif edit.section == "news":
        if isinstance(edit.news, str):
            changes["news"] = tuple(parse_news_text(edit.news))
        elif edit.news is not None:
            changes["news"] = normalize_news(edit.news)

    return replace(content, **changes)


def _write(
    tool: str,
    company_id: str,
    store: ContentStore,
    build: Callable[[CompanyContent], CompanyContent],
    start_time: float,
) -> dict[str, Any]:
    try:
        params = CompanyParams(company_id=company_id)
        current = store.get_content(params.company_id)
        updated = build(current)
        payload = store.replace_content(params.company_id, updated)
    except ValueError as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)
    except CompanyNotFoundError:
        return build_error_response("not_found", f"Company not found: {company_id}", company_id=company_id)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "meta": build_meta(tool, duration_ms),
        "ok": True,
        "id": params.company_id,
        "content": payload,
    }


def save_company_section(
    company_id: str,
    section: str,
    store: ContentStore | None = None,
    **values: Any,
) -> dict[str, Any]:
    """
    Save one editor section.

    Args:
        company_id: Company id
        section: One of overview, prices, financials, news
        **values: SectionEdit fields for that section

    Returns:
        Dict with the stored payload
    """
    start_time = perf_counter()
    store = store or get_store()

    try:
        edit = SectionEdit(section=section, **values)
    except (ValueError, TypeError) as e:
        return build_error_response("invalid_parameters", str(e), company_id=company_id)

    return _write(
        "save_company_section",
        company_id,
        store,
        lambda current: apply_section_edit(current, edit),
        start_time,
    )


def replace_company_content(
    company_id: str,
    document: dict[str, Any],
    store: ContentStore | None = None,
) -> dict[str, Any]:
    """
    Replace a company's whole document.

    The document may use any legacy or current field shape; it is stored
    in canonical form.
    """
    start_time = perf_counter()
    store = store or get_store()
    return _write(
        "replace_company_content",
        company_id,
        store,
        lambda _current: normalize_content(document),
        start_time,
    )
