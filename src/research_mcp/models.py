"""Canonical content records.

Everything the store hands out goes through ``utils.normalize`` and comes
back as one of these frozen records. The storage shape is recovered with
``as_raw()`` / ``to_payload()``; normalizing that shape again yields an
equal record.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

import pandas as pd

DEFAULT_FINANCIAL_COLUMNS: tuple[str, ...] = ("date", "revenue", "ebitda")
LEGACY_FINANCIAL_COLUMNS: tuple[str, ...] = ("metric", "value")

# Exact field set written back to the store
PAYLOAD_FIELDS: tuple[str, ...] = (
    "overview",
    "summary",
    "prices",
    "financials",
    "news",
    "pricePrivate",
    "ticker",
)


@dataclass(frozen=True)
class PricePoint:
    """One point of a manual price series. ``value`` is always finite."""

    date: str
    value: float

    def as_raw(self) -> dict[str, Any]:
        return {"date": self.date, "value": self.value}


def default_price_label(index: int) -> str:
    """Label used for points stored without a date (1-based)."""
    return f"p{index + 1}"


@dataclass(frozen=True)
class FinancialTable:
    """
    Column-ordered financial table.

    Columns are unique. Rows are private copies and may omit any column;
    a missing cell is rendered as a placeholder.
    """

    columns: tuple[str, ...] = DEFAULT_FINANCIAL_COLUMNS
    rows: tuple[dict[str, Any], ...] = ()

    def __post_init__(self) -> None:
        # Deduplicate columns, first occurrence wins
        seen: list[str] = []
        for col in self.columns:
            name = str(col)
            if name not in seen:
                seen.append(name)
        object.__setattr__(self, "columns", tuple(seen))
        object.__setattr__(self, "rows", tuple(dict(r) for r in self.rows))

    @property
    def date_column(self) -> str | None:
        """First column named ``date`` (case-insensitive), if any."""
        for col in self.columns:
            if col.lower() == "date":
                return col
        return None

    @property
    def series_columns(self) -> tuple[str, ...]:
        """All columns except the date column."""
        return tuple(c for c in self.columns if c.lower() != "date")

    def find_column(self, needle: str) -> str | None:
        """First column whose name contains ``needle`` (case-insensitive)."""
        needle = needle.lower()
        for col in self.columns:
            if needle in col.lower():
                return col
        return None

    def as_raw(self) -> dict[str, Any]:
        """Current storage shape: ``{"columns": [...], "rows": [...]}``."""
        return {"columns": list(self.columns), "rows": [dict(r) for r in self.rows]}

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with exactly ``columns``; missing cells are NaN."""
        return pd.DataFrame(list(self.rows), columns=list(self.columns))

    def with_column(self, name: str) -> FinancialTable:
        """Append a column. Blank or existing names are ignored."""
        name = (name or "").strip()
        if not name or name in self.columns:
            return self
        return replace(self, columns=self.columns + (name,))

    def without_column(self, name: str) -> FinancialTable:
        """Drop a column and its cells from every row."""
        if name not in self.columns:
            return self
        rows = tuple({k: v for k, v in r.items() if k != name} for r in self.rows)
        return FinancialTable(
            columns=tuple(c for c in self.columns if c != name),
            rows=rows,
        )

    def with_blank_row(self) -> FinancialTable:
        """Append a row with an empty cell for every column."""
        return replace(self, rows=self.rows + ({c: "" for c in self.columns},))


@dataclass(frozen=True)
class CompanyContent:
    """One company's research document."""

    overview: str = ""
    summary: str = ""
    financials: FinancialTable = field(default_factory=FinancialTable)
    prices: tuple[PricePoint, ...] = ()
    news: tuple[str, ...] = ()
    price_private: bool = False
    ticker: str = ""

    @property
    def has_manual_summary(self) -> bool:
        return bool(self.summary.strip())

    def to_payload(self) -> dict[str, Any]:
        """Persistence shape with the exact stored field set."""
        return {
            "overview": self.overview,
            "summary": self.summary,
            "prices": [p.as_raw() for p in self.prices],
            "financials": self.financials.as_raw(),
            "news": list(self.news),
            "pricePrivate": self.price_private,
            "ticker": self.ticker,
        }


@dataclass(frozen=True)
class Company:
    """Directory entry."""

    id: str
    name: str

    def as_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}


def append_price_point(points: tuple[PricePoint, ...]) -> tuple[PricePoint, ...]:
    """Append a zero point labelled after the current series length."""
    return points + (PricePoint(date=default_price_label(len(points)), value=0.0),)


def remove_price_point(points: tuple[PricePoint, ...], index: int) -> tuple[PricePoint, ...]:
    """Remove the point at ``index``; out-of-range indexes are ignored."""
    if not 0 <= index < len(points):
        return points
    return points[:index] + points[index + 1 :]
