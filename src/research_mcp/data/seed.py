"""Demo firms loaded into an empty store.

Prices are kept in the legacy flat-number shape on purpose: they are read
back through the normalizer like any other historical record.
"""

from typing import Any

_DEFAULT_COLUMNS = ["date", "revenue", "ebitda"]


def _financials(revenue: int, ebitda: int) -> dict[str, Any]:
    return {
        "columns": list(_DEFAULT_COLUMNS),
        "rows": [{"date": "2024-12-31", "revenue": revenue, "ebitda": ebitda}],
    }


SEED_COMPANIES: list[dict[str, Any]] = [
    {
        "id": "citadel",
        "name": "Citadel Securities",
        "overview": "Global market maker; equities/options/fixed income.",
        "summary": "",
        "prices": [32, 34, 36, 33, 35],
        "pricePrivate": True,
        "ticker": "",
        "financials": _financials(6200, 2852),
        "news": ["Expanding APAC options franchise."],
    },
    {
        "id": "jane",
        "name": "Jane Street",
        "overview": "Multi-asset liquidity provider with deep research culture.",
        "summary": "",
        "prices": [22, 23, 25, 26, 25],
        "pricePrivate": True,
        "ticker": "",
        "financials": _financials(3800, 1444),
        "news": ["Hiring in digital assets MM."],
    },
    {
        "id": "hrt",
        "name": "Hudson River Trading",
        "overview": "Quant market maker across equities/FX with low-latency infra.",
        "summary": "",
        "prices": [18, 19, 19, 21, 24],
        "pricePrivate": True,
        "ticker": "",
        "financials": _financials(1900, 665),
        "news": ["New microwave routes EU↔US."],
    },
    {
        "id": "drw",
        "name": "DRW",
        "overview": "Diversified principal trading across rates, credit, energy, crypto.",
        "summary": "",
        "prices": [12, 14, 13, 15, 17],
        "pricePrivate": True,
        "ticker": "",
        "financials": _financials(2400, 792),
        "news": ["Scaling energy/power trading footprint."],
    },
    {
        "id": "virtu",
        "name": "Virtu Financial",
        "overview": "Public electronic market maker with equities/ETF focus.",
        "summary": "",
        "prices": [9, 9.5, 10, 11, 10.5],
        "pricePrivate": False,
        "ticker": "VIRT:NASDAQ",
        "financials": _financials(3000, 900),
        "news": ["Expanding analytics suite."],
    },
    {
        "id": "flow",
        "name": "Flow Traders",
        "overview": "European ETF/derivatives liquidity provider.",
        "summary": "",
        "prices": [7, 7.5, 8, 8.4, 8.2],
        "pricePrivate": True,
        "ticker": "",
        "financials": _financials(1100, 319),
        "news": ["Launching FI ETF quoting in NYC."],
    },
]
