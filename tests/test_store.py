"""Tests for the diskcache-backed content store."""

import pytest

from research_mcp.data import store as store_module
from research_mcp.data.seed import SEED_COMPANIES
from research_mcp.data.store import (
    CONTENT_PREFIX,
    CompanyExistsError,
    CompanyNotFoundError,
    ContentStore,
    get_store,
)
from research_mcp.models import CompanyContent, PricePoint
from research_mcp.utils.validators import CompanyParams


class TestDirectory:
    """Tests for the company directory."""

    def test_empty_store(self, store) -> None:
        assert store.list_companies() == []

    def test_create_and_get(self, store) -> None:
        company = store.create_company(CompanyParams(company_id="Acme", name="Acme Markets"))

        assert company.id == "acme"
        assert store.exists("acme")
        assert store.get_company("acme").name == "Acme Markets"
        assert store.get_document("acme") == {}

    def test_create_duplicate(self, store) -> None:
        store.create_company(CompanyParams(company_id="acme", name="Acme"))
        with pytest.raises(CompanyExistsError, match="already exists"):
            store.create_company(CompanyParams(company_id="ACME", name="Other"))

    def test_create_requires_name(self, store) -> None:
        with pytest.raises(ValueError, match="name required"):
            store.create_company(CompanyParams(company_id="acme"))
        assert not store.exists("acme")

    def test_list_ordered_by_name(self, seeded_store) -> None:
        names = [c.name for c in seeded_store.list_companies()]
        assert names == sorted(names)
        assert names[0] == "Citadel Securities"

    def test_rename(self, store) -> None:
        store.create_company(CompanyParams(company_id="acme", name="Acme"))
        store.rename_company(CompanyParams(company_id="acme", name="Acme Capital"))
        assert store.get_company("acme").name == "Acme Capital"

    def test_rename_missing(self, store) -> None:
        with pytest.raises(CompanyNotFoundError):
            store.rename_company(CompanyParams(company_id="ghost", name="Ghost"))

    def test_get_missing(self, store) -> None:
        with pytest.raises(CompanyNotFoundError):
            store.get_company("ghost")
        with pytest.raises(CompanyNotFoundError):
            store.get_document("ghost")


class TestDocuments:
    """Tests for document reads and whole-document writes."""

    def test_legacy_document_normalized_on_read(self, store, legacy_document) -> None:
        store.create_company(CompanyParams(company_id="jane", name="Jane Street"), legacy_document)
        content = store.get_content("jane")

        assert content.financials.columns == ("metric", "value")
        assert content.prices[0] == PricePoint("p1", 22.0)

    def test_raw_document_kept_as_stored(self, store, legacy_document) -> None:
        store.create_company(CompanyParams(company_id="jane", name="Jane Street"), legacy_document)
        assert store.get_document("jane") == legacy_document

    def test_replace_content(self, store, current_content) -> None:
        store.create_company(CompanyParams(company_id="citadel", name="Citadel"))
        payload = store.replace_content("citadel", current_content)

        assert payload == current_content.to_payload()
        assert store.get_document("citadel") == payload
        assert store.get_content("citadel") == current_content

    def test_replace_missing(self, store) -> None:
        with pytest.raises(CompanyNotFoundError):
            store.replace_content("ghost", CompanyContent())

    def test_undecodable_document_reads_empty(self, store) -> None:
        store.create_company(CompanyParams(company_id="acme", name="Acme"))
        store.cache.set(f"{CONTENT_PREFIX}acme", "{not json")

        assert store.get_document("acme") == {}
        assert store.get_content("acme") == CompanyContent()

    def test_persists_across_instances(self, tmp_path) -> None:
        directory = str(tmp_path / "shared")
        first = ContentStore(directory)
        first.create_company(CompanyParams(company_id="acme", name="Acme"), {"news": ["x"]})
        first.close()

        second = ContentStore(directory)
        try:
            assert second.get_content("acme").news == ("x",)
        finally:
            second.close()


class TestSeed:
    """Tests for demo seeding."""

    def test_seed_inserts_all(self, store) -> None:
        assert store.seed(SEED_COMPANIES) == len(SEED_COMPANIES)
        assert len(store.list_companies()) == len(SEED_COMPANIES)

    def test_seed_is_idempotent(self, seeded_store) -> None:
        assert seeded_store.seed(SEED_COMPANIES) == 0

    def test_seed_keeps_edits(self, seeded_store) -> None:
        seeded_store.replace_content("citadel", CompanyContent(overview="Edited"))
        seeded_store.seed(SEED_COMPANIES)
        assert seeded_store.get_content("citadel").overview == "Edited"

    def test_seed_prices_are_legacy_numbers(self, seeded_store) -> None:
        """Seeded prices go through the legacy decoder."""
        content = seeded_store.get_content("virtu")

        assert [p.date for p in content.prices] == ["p1", "p2", "p3", "p4", "p5"]
        assert content.ticker == "VIRT:NASDAQ"
        assert content.price_private is False

    def test_clear(self, seeded_store) -> None:
        seeded_store.clear()
        assert seeded_store.list_companies() == []


class TestGetStore:
    """Tests for the shared store accessor."""

    @pytest.fixture(autouse=True)
    def reset_shared_store(self, monkeypatch, tmp_path):
        monkeypatch.setattr(store_module, "_store", None)
        monkeypatch.setenv("CONTENT_DIR", str(tmp_path / "shared"))
        yield
        if store_module._store is not None:
            store_module._store.close()

    def test_seeds_by_default(self, monkeypatch) -> None:
        monkeypatch.delenv("SEED_CONTENT", raising=False)
        shared = get_store()

        assert shared is get_store()
        assert len(shared.list_companies()) == len(SEED_COMPANIES)

    def test_seed_disabled(self, monkeypatch) -> None:
        monkeypatch.setenv("SEED_CONTENT", "0")
        assert get_store().list_companies() == []
