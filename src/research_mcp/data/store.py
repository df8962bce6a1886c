"""Key-value content store backed by diskcache.

Each company has a directory entry (``company:<id>`` -> name) and one
content document (``content:<id>`` -> JSON text). Documents are opaque
here: they are decoded with the normalizer on read and replaced whole on
write.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import diskcache

from research_mcp.models import Company, CompanyContent
from research_mcp.utils.normalize import canonical_dumps, normalize_content
from research_mcp.utils.validators import CompanyParams

logger = logging.getLogger(__name__)

COMPANY_PREFIX = "company:"
CONTENT_PREFIX = "content:"


class CompanyNotFoundError(KeyError):
    """No company with this id."""

    pass


class CompanyExistsError(ValueError):
    """A company with this id already exists."""

    pass


class ContentStore:
    """
    Company directory plus one stored document per company.

    Reads never fail on malformed documents; undecodable text is treated
    as an empty document.
    """

    def __init__(self, directory: str | None = None):
        if directory is None:
            directory = os.environ.get("CONTENT_DIR", ".cache/content")
        self.cache: diskcache.Cache = diskcache.Cache(directory)

    # ---------------- Directory ----------------

    def list_companies(self) -> list[Company]:
        """All companies ordered by name."""
        companies = [
            Company(id=key[len(COMPANY_PREFIX) :], name=self.cache[key])
            for key in self.cache.iterkeys()
            if isinstance(key, str) and key.startswith(COMPANY_PREFIX)
        ]
        return sorted(companies, key=lambda c: (c.name, c.id))

    def exists(self, company_id: str) -> bool:
        return f"{COMPANY_PREFIX}{company_id}" in self.cache

    def get_company(self, company_id: str) -> Company:
        name = self.cache.get(f"{COMPANY_PREFIX}{company_id}")
        if name is None:
            raise CompanyNotFoundError(company_id)
        return Company(id=company_id, name=name)

    def create_company(self, params: CompanyParams, document: Any = None) -> Company:
        """
        Register a company with its initial document.

        Args:
            params: Validated id and name
            document: Initial stored document (any shape; default empty)

        Raises:
            ValueError: If the name is blank
            CompanyExistsError: If the id is taken
        """
        params.require_name()
        key = f"{COMPANY_PREFIX}{params.company_id}"
        with self.cache.transact():
            if key in self.cache:
                raise CompanyExistsError(f"Company already exists: {params.company_id}")
            self.cache.set(key, params.name)
            self.put_document(params.company_id, document if document is not None else {})

        logger.info(f"Created company {params.company_id}")
        return Company(id=params.company_id, name=params.name)

    def rename_company(self, params: CompanyParams) -> Company:
        params.require_name()
        if not self.exists(params.company_id):
            raise CompanyNotFoundError(params.company_id)
        self.cache.set(f"{COMPANY_PREFIX}{params.company_id}", params.name)
        return Company(id=params.company_id, name=params.name)

    # ---------------- Documents ----------------

    def put_document(self, company_id: str, document: Any) -> None:
        """Store a document as-is (JSON text)."""
        self.cache.set(f"{CONTENT_PREFIX}{company_id}", canonical_dumps(document))

    def get_document(self, company_id: str) -> Any:
        """
        Raw stored document, decoded from JSON.

        Raises:
            CompanyNotFoundError: If no document exists for the id
        """
        text = self.cache.get(f"{CONTENT_PREFIX}{company_id}")
        if text is None:
            raise CompanyNotFoundError(company_id)
        try:
            return json.loads(text)
        except (TypeError, ValueError):
            logger.warning(f"Undecodable document for {company_id}, treating as empty")
            return {}

    def get_content(self, company_id: str) -> CompanyContent:
        """Normalized content for a company."""
        return normalize_content(self.get_document(company_id))

    def replace_content(self, company_id: str, content: CompanyContent) -> dict[str, Any]:
        """
        Replace the whole document. There is no field-level patching.

        Returns:
            The stored payload
        """
        if not self.exists(company_id):
            raise CompanyNotFoundError(company_id)
        payload = content.to_payload()
        self.put_document(company_id, payload)
        logger.info(f"Replaced content for {company_id}")
        return payload

    # ---------------- Maintenance ----------------

    def seed(self, documents: list[dict[str, Any]]) -> int:
        """
        Insert demo companies that are not present yet.

        Returns:
            Number of companies inserted
        """
        inserted = 0
        for doc in documents:
            params = CompanyParams(company_id=doc["id"], name=doc["name"])
            if self.exists(params.company_id):
                continue
            body = {k: v for k, v in doc.items() if k not in ("id", "name")}
            self.create_company(params, body)
            inserted += 1
        if inserted:
            logger.info(f"Seeded {inserted} companies")
        return inserted

    def clear(self) -> None:
        """Remove every company and document."""
        self.cache.clear()

    def close(self) -> None:
        self.cache.close()


_store: ContentStore | None = None


def get_store() -> ContentStore:
    """Get or create the shared store, seeding demo firms unless SEED_CONTENT=0."""
    global _store
    if _store is None:
        _store = ContentStore()
        if os.environ.get("SEED_CONTENT", "1") != "0":
            from research_mcp.data.seed import SEED_COMPANIES

            _store.seed(SEED_COMPANIES)
    return _store
