"""Response metadata utilities."""

from datetime import datetime, timezone
from typing import Any

from research_mcp import SCHEMA_VERSION, SERVER_VERSION


def build_meta(tool: str, duration_ms: float | None = None) -> dict[str, Any]:
    """
    Build standard metadata block for responses.

    Args:
        tool: Name of the tool producing this response
        duration_ms: Execution time in milliseconds (optional)

    Returns:
        Metadata dict with version info
    """
    meta: dict[str, Any] = {
        "server_version": SERVER_VERSION,
        "schema_version": SCHEMA_VERSION,
        "tool": tool,
    }
    if duration_ms is not None:
        meta["duration_ms"] = round(duration_ms, 1)
    return meta


def build_provenance(source: str, **kwargs: Any) -> dict[str, Any]:
    """
    Build provenance block for content read from the store.

    Args:
        source: Data source name (e.g., "content_store")
        **kwargs: Additional provenance fields

    Returns:
        Provenance dict with an ``as_of`` timestamp and a warnings list
    """
    prov: dict[str, Any] = {
        "source": source,
        "as_of": datetime.now(timezone.utc).isoformat(),
    }
    prov.update(kwargs)

    if "warnings" not in prov:
        prov["warnings"] = []

    return prov


def build_error_response(
    error_type: str,
    message: str,
    company_id: str | None = None,
) -> dict[str, Any]:
    """
    Build standardized error response.

    Args:
        error_type: Type of error (invalid_parameters, not_found, conflict)
        message: Human-readable error message
        company_id: Company that caused the error (if applicable)

    Returns:
        Error response dict
    """
    response: dict[str, Any] = {
        "error": True,
        "error_type": error_type,
        "message": message,
        "meta": build_meta("error"),
    }

    if company_id is not None:
        response["company_id"] = company_id

    return response
