"""Company research tools."""

from research_mcp.tools.companies import create_company, list_companies, rename_company
from research_mcp.tools.content import company_content
from research_mcp.tools.dashboard import company_dashboard
from research_mcp.tools.edit import replace_company_content, save_company_section

__all__ = [
    "company_content",
    "company_dashboard",
    "create_company",
    "list_companies",
    "rename_company",
    "replace_company_content",
    "save_company_section",
]
