"""Display formatting for numbers and table cells."""

import math
import numbers
from typing import Any

PLACEHOLDER = "—"

# Matches the default grouping of an en-US locale (max 3 fraction digits)
MAX_FRACTION_DIGITS = 3


def _parse_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, numbers.Real):
        raw = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
    else:
        return None
    try:
        return float(raw)
    except (ValueError, OverflowError):
        return None


def format_number(value: Any) -> Any:
    """
    Format a number with grouped digits.

    Numeric strings are parsed first. Anything that is not a number
    (None, booleans, text, NaN) is returned unchanged.

    Examples:
        6200 -> "6,200"
        1234.5678 -> "1,234.568"
        "n/a" -> "n/a"
    """
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        # Exact, also for ints beyond the float range
        return f"{int(value):,}"
    num = _parse_number(value)
    if num is None or math.isnan(num):
        return value
    if math.isinf(num):
        return "∞" if num > 0 else "-∞"
    if num.is_integer():
        return f"{int(num):,}"
    text = f"{num:,.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_cell(value: Any) -> str:
    """Render a table cell: placeholder for blanks, grouped digits for numbers."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return PLACEHOLDER
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        num = _parse_number(value)
        if num is not None and math.isnan(num):
            return PLACEHOLDER
        return str(format_number(value))
    return str(value)


def format_tooltip(label: str, value: Any, date: str) -> str:
    """Tooltip text attached to chart markers."""
    return f"{label}: {format_number(value)} ({date})"
