"""Normalization of stored company content.

The content store holds documents written by several generations of the
editor, so the same field can arrive in more than one shape. This module
decodes each field into its canonical record without ever raising.

The normalization contract:
1. Detection is structural: the legacy pattern is tried first, then the
   current pattern, then the default. There is no version tag in storage.
2. financials: legacy ``[[metric, value], ...]`` pairs become a
   ``metric``/``value`` table; current ``{columns, rows}`` passes through
   with default columns filled in; anything else is the empty default table.
3. prices: legacy flat numbers become ``p1..pN`` points; current
   ``{date, value}`` objects keep their order, non-objects are dropped.
4. Every plotted value is a finite float (coercion failures become 0).
5. The canonical shape is a fixed point: normalizing ``as_raw()`` /
   ``to_payload()`` output returns an equal record.
"""

from __future__ import annotations

import json
import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from research_mcp.models import (
    DEFAULT_FINANCIAL_COLUMNS,
    LEGACY_FINANCIAL_COLUMNS,
    CompanyContent,
    FinancialTable,
    PricePoint,
    default_price_label,
)

logger = logging.getLogger(__name__)


class FinancialsShape(Enum):
    """Known historical shapes of the ``financials`` field."""

    LEGACY = "legacy_pairs"
    CURRENT = "columns_rows"
    DEFAULT = "default"


class PricesShape(Enum):
    """Known historical shapes of the ``prices`` field."""

    LEGACY = "legacy_numbers"
    CURRENT = "date_value_objects"
    DEFAULT = "default"


def canonical_dumps(obj: Any) -> str:
    """Produce canonical JSON string with sorted keys and minimal separators.

    Uses allow_nan=False to fail fast if NaN/inf values slip through
    normalization.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


# ---------------- Scalars ----------------


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _finite_float(value: Any) -> float | None:
    """Finite float for numbers and numeric text, else None."""
    if _is_number(value):
        raw = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
    else:
        return None
    try:
        num = float(raw)
    except (ValueError, OverflowError):
        # OverflowError: ints beyond the float range
        return None
    return num if math.isfinite(num) else None


def coerce_number(value: Any) -> float:
    """
    Coerce a stored cell to a finite float.

    None, blanks, non-numeric text, containers, NaN, infinities and
    integers beyond the float range all become 0.0. Booleans count as 0/1.
    """
    if isinstance(value, bool):
        return float(value)
    num = _finite_float(value)
    return 0.0 if num is None else num


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings that parse as finite numbers."""
    return _finite_float(value) is not None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


# ---------------- Shape detection ----------------


def detect_financials_shape(raw: Any) -> FinancialsShape:
    """Classify a stored ``financials`` value."""
    if _is_list(raw) and len(raw) > 0 and _is_list(raw[0]):
        return FinancialsShape.LEGACY
    if isinstance(raw, Mapping):
        return FinancialsShape.CURRENT
    return FinancialsShape.DEFAULT


def detect_prices_shape(raw: Any) -> PricesShape:
    """Classify a stored ``prices`` value."""
    if _is_list(raw) and len(raw) > 0 and _is_number(raw[0]):
        return PricesShape.LEGACY
    if _is_list(raw):
        return PricesShape.CURRENT
    return PricesShape.DEFAULT


# ---------------- Field normalizers ----------------


def normalize_financials(raw: Any) -> FinancialTable:
    """Decode any stored ``financials`` value into a FinancialTable."""
    shape = detect_financials_shape(raw)

    if shape is FinancialsShape.LEGACY:
        rows = []
        for pair in raw:
            if not _is_list(pair):
                continue
            metric = pair[0] if len(pair) > 0 else None
            value = pair[1] if len(pair) > 1 else None
            rows.append({"metric": metric, "value": value})
        return FinancialTable(columns=LEGACY_FINANCIAL_COLUMNS, rows=tuple(rows))

    if shape is FinancialsShape.CURRENT:
        columns = raw.get("columns")
        if not _is_list(columns) or not columns:
            columns = DEFAULT_FINANCIAL_COLUMNS
        rows = raw.get("rows")
        if not _is_list(rows):
            rows = ()
        return FinancialTable(
            columns=tuple(_text(c) for c in columns),
            rows=tuple(r for r in rows if isinstance(r, Mapping)),
        )

    if raw is not None:
        logger.debug("financials: unrecognized shape %s, using default table", type(raw).__name__)
    return FinancialTable()


def normalize_prices(raw: Any) -> tuple[PricePoint, ...]:
    """Decode any stored ``prices`` value into an ordered point series."""
    shape = detect_prices_shape(raw)

    if shape is PricesShape.LEGACY:
        return tuple(
            PricePoint(date=default_price_label(i), value=coerce_number(v))
            for i, v in enumerate(raw)
        )

    if shape is PricesShape.CURRENT:
        points = []
        for i, entry in enumerate(raw):
            if not isinstance(entry, Mapping):
                continue
            date = entry.get("date")
            label = _text(date).strip() or default_price_label(i)
            points.append(PricePoint(date=label, value=coerce_number(entry.get("value"))))
        return tuple(points)

    if raw is not None:
        logger.debug("prices: unrecognized shape %s, using empty series", type(raw).__name__)
    return ()


def normalize_news(raw: Any) -> tuple[str, ...]:
    """Stringify and strip news items, dropping blanks."""
    if not _is_list(raw):
        return ()
    items = (_text(item).strip() for item in raw if item is not None)
    return tuple(item for item in items if item)


def normalize_content(raw: Any) -> CompanyContent:
    """Decode a whole stored document. Non-mapping input yields empty content."""
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.debug("content: unrecognized document %s, using empty content", type(raw).__name__)
        raw = {}

    return CompanyContent(
        overview=_text(raw.get("overview")),
        summary=_text(raw.get("summary")),
        financials=normalize_financials(raw.get("financials")),
        prices=normalize_prices(raw.get("prices")),
        news=normalize_news(raw.get("news")),
        price_private=bool(raw.get("pricePrivate")),
        ticker=_text(raw.get("ticker")).strip(),
    )
