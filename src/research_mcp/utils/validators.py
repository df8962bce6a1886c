"""Validation utilities and parameter classes."""

import re
from dataclasses import dataclass

from research_mcp.utils.sanitize import sanitize_text

# Editor sections that can be saved independently
VALID_SECTIONS = {"overview", "prices", "financials", "news"}

# Chart kinds served as resources
VALID_CHART_KINDS = {"price", "financials", "sparkline"}

_SLUG_INVALID = re.compile(r"[^a-z0-9_-]+")


def slugify_company_id(raw: str | None) -> str:
    """Lowercase id with runs of characters outside [a-z0-9_-] collapsed to '-'."""
    return _SLUG_INVALID.sub("-", str(raw or "").strip().lower())


@dataclass(frozen=True)
class CompanyParams:
    """Immutable company identity. Used for store keys and resource URIs."""

    company_id: str
    name: str = ""

    def __post_init__(self) -> None:
        company_id = slugify_company_id(self.company_id)
        if not company_id:
            raise ValueError("Company id required")
        object.__setattr__(self, "company_id", company_id)
        object.__setattr__(self, "name", sanitize_text(self.name, max_length=120) or "")

    def require_name(self) -> None:
        if not self.name:
            raise ValueError("Company name required")

    def to_uri(self) -> str:
        """Canonical URI of the stored content document."""
        return f"content://{self.company_id}"


def validate_section(section: str) -> str:
    """Normalize an editor section name."""
    normalized = (section or "").lower().strip()
    if normalized not in VALID_SECTIONS:
        raise ValueError(f"Invalid section '{section}'. Must be one of: {sorted(VALID_SECTIONS)}")
    return normalized


def validate_chart_kind(kind: str) -> str:
    """Normalize a chart kind name."""
    normalized = (kind or "").lower().strip()
    if normalized not in VALID_CHART_KINDS:
        raise ValueError(f"Invalid chart '{kind}'. Must be one of: {sorted(VALID_CHART_KINDS)}")
    return normalized
