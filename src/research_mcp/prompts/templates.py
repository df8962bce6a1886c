"""Prompt templates for company research."""

from typing import Any

# Prompt definitions
PROMPTS = {
    "company_brief": {
        "description": "Research brief for one company from its stored content",
        "arguments": [{"name": "company_id", "required": True}],
    },
    "refresh_financials": {
        "description": "Review and update a company's financial table",
        "arguments": [{"name": "company_id", "required": True}],
    },
}


def list_prompts() -> list[dict[str, Any]]:
    """List available prompts."""
    return [
        {
            "name": name,
            "description": info["description"],
            "arguments": info["arguments"],
        }
        for name, info in PROMPTS.items()
    ]


def get_prompt(name: str, arguments: dict[str, str]) -> dict[str, Any] | None:
    """
    Get a prompt by name with arguments filled in.

    Returns dict with 'messages' key for MCP GetPromptResult.
    """
    if name not in PROMPTS:
        return None

    company_id = arguments.get("company_id", "")

    if name == "company_brief":
        text = f"""Write a research brief for {company_id}.

Execute these tools in order:
1. get_company_content("{company_id}")
2. get_company_dashboard("{company_id}")

Structure:
- Summary: use effective_summary verbatim
- Price: if price.source.kind is "private", describe the manual series using the
  chart tooltips; if "public", name the ticker; if "unset", say no price source is set
- Financials: read the financial table; call out the most recent revenue and EBITDA
- News: list each item as a bullet (say "No news" if the list is empty)

Do not invent figures that are not in the stored content."""
    else:
        text = f"""Review the financial table for {company_id}.

1. Call get_company_content("{company_id}") and read content.financials.
2. Check that every row has a date and numeric values for each metric column.
3. Propose the corrected table as {{"columns": [...], "rows": [...]}}.
4. Only after confirmation, call update_company_section("{company_id}", "financials", financials=...)."""

    return {"messages": [{"role": "user", "content": text}]}
