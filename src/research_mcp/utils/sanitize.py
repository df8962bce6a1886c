"""Text sanitization utilities."""

import re

CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_text(text: str | None, max_length: int = 500) -> str | None:
    """
    Sanitize editor-supplied single-line text.

    Removes control characters and truncates to max_length.
    Apply to: company name, ticker, any single-line field.

    Args:
        text: Text to sanitize (may be None)
        max_length: Maximum length before truncation

    Returns:
        Sanitized text or None if input was None
    """
    if text is None:
        return None

    text = CONTROL_CHARS.sub("", text)

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text.strip()


def parse_news_text(text: str | None) -> list[str]:
    """
    Split editor text into news items.

    One item per line; lines are trimmed and blank lines dropped.
    """
    if not text:
        return []
    lines = (CONTROL_CHARS.sub("", line).strip() for line in text.splitlines())
    return [line for line in lines if line]
