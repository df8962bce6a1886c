"""Data layer for stored company content."""

from research_mcp.data.seed import SEED_COMPANIES
from research_mcp.data.store import (
    CompanyExistsError,
    CompanyNotFoundError,
    ContentStore,
    get_store,
)

__all__ = [
    "SEED_COMPANIES",
    "CompanyExistsError",
    "CompanyNotFoundError",
    "ContentStore",
    "get_store",
]
