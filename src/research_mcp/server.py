"""Company Research MCP Server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from research_mcp import SCHEMA_VERSION, SERVER_VERSION
from research_mcp.prompts.templates import get_prompt
from research_mcp.resources.content_resource import (
    ResourceNotFoundError,
    read_chart_resource,
    read_content_resource,
)
from research_mcp.tools import (
    company_content,
    company_dashboard,
    create_company,
    list_companies,
    rename_company,
    replace_company_content,
    save_company_section,
)

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="company-research",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
def get_companies() -> str:
    """
    List all companies in the research store, ordered by name.

    Returns:
        JSON with company ids and display names
    """
    result = list_companies()
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def add_company(
    company_id: str,
    name: str,
    ticker: str = "",
    price_private: bool = False,
    overview: str = "",
) -> str:
    """
    Create a company with an empty research document.

    Args:
        company_id: Short id (lowercased; other characters become '-')
        name: Display name
        ticker: Public ticker, e.g. VIRT:NASDAQ (used when price_private is false)
        price_private: Use a manually entered price series instead of a ticker
        overview: Long-form description

    Returns:
        JSON with the new id and the updated company list
    """
    result = create_company(
        company_id=company_id,
        name=name,
        ticker=ticker,
        price_private=price_private,
        overview=overview,
    )
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def rename(company_id: str, name: str) -> str:
    """
    Rename a company.

    Args:
        company_id: Company id
        name: New display name

    Returns:
        JSON with the updated company list
    """
    result = rename_company(company_id=company_id, name=name)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def get_company_content(company_id: str) -> str:
    """
    Get a company's research content in canonical form.

    Legacy stored shapes are converted and listed as provenance warnings.

    Args:
        company_id: Company id

    Returns:
        JSON with overview, summary, prices, financials, news, ticker settings
        and the effective summary (manual or synthesized)
    """
    result = company_content(company_id=company_id)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def get_company_dashboard(company_id: str) -> str:
    """
    Render the company dashboard.

    Includes the summary, price source (manual series or public ticker embed),
    SVG price chart and sparkline, financial table and multi-series chart,
    and the news list. Chart markers carry tooltip text of the form
    "<series>: <value> (<date>)".

    Args:
        company_id: Company id

    Returns:
        JSON with rendered markup and tooltip metadata per panel
    """
    result = company_dashboard(company_id=company_id)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def update_company_section(
    company_id: str,
    section: str,
    overview: str | None = None,
    summary: str | None = None,
    prices: Any = None,
    ticker: str | None = None,
    price_private: bool | None = None,
    financials: Any = None,
    news: Any = None,
) -> str:
    """
    Save one section of a company's research document.

    Only the fields of the given section are used; omitted fields keep
    their stored values. The whole document is then written back.

    Args:
        company_id: Company id
        section: overview | prices | financials | news
        overview: Long-form description (overview section)
        summary: Manual summary, 150 words max (overview section)
        prices: List of {date, value} or plain numbers (prices section)
        ticker: Public ticker (prices section)
        price_private: Use the manual series (prices section)
        financials: {columns, rows} table (financials section)
        news: List of items or newline-separated text (news section)

    Returns:
        JSON with the stored document
    """
    values = {
        "overview": overview,
        "summary": summary,
        "prices": prices,
        "ticker": ticker,
        "price_private": price_private,
        "financials": financials,
        "news": news,
    }
    result = save_company_section(company_id=company_id, section=section, **values)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def replace_content(company_id: str, document: dict[str, Any]) -> str:
    """
    Replace a company's whole research document.

    Args:
        company_id: Company id
        document: {overview, summary, prices, financials, news, pricePrivate, ticker}

    Returns:
        JSON with the stored document in canonical form
    """
    result = replace_company_content(company_id=company_id, document=document)
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# RESOURCES
# ============================================================================


@mcp.resource("content://{company_id}")
def get_content_document(company_id: str) -> str:
    """
    Get a company's canonical content document as JSON.

    Args:
        company_id: Company id

    Returns:
        JSON with overview, summary, prices, financials, news, pricePrivate, ticker
    """
    try:
        text, _mime = read_content_resource(company_id)
        return text
    except ResourceNotFoundError as e:
        return f"{e}. Call get_companies to list known ids."
    except Exception as e:
        return f"Error: {e}"


@mcp.resource("chart://{company_id}/{kind}")
def get_chart(company_id: str, kind: str) -> str:
    """
    Get one rendered chart.

    Args:
        company_id: Company id
        kind: price, financials or sparkline

    Returns:
        SVG markup, or an HTML placeholder when there is no data
    """
    try:
        markup, _mime = read_chart_resource(company_id, kind)
        return markup
    except ResourceNotFoundError as e:
        return f"{e}. Call get_companies to list known ids."
    except Exception as e:
        return f"Error: {e}"


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt
def company_brief(company_id: str) -> str:
    """Write a research brief for a company from its stored content."""
    result = get_prompt("company_brief", {"company_id": company_id})
    if result:
        return result["messages"][0]["content"]
    return f"Summarize {company_id} using the get_company_dashboard tool."


@mcp.prompt
def refresh_financials(company_id: str) -> str:
    """Review and correct a company's financial table."""
    result = get_prompt("refresh_financials", {"company_id": company_id})
    if result:
        return result["messages"][0]["content"]
    return f"Review the financials of {company_id} using get_company_content."


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(f"Starting Company Research MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})")
    mcp.run()


if __name__ == "__main__":
    main()
