"""Utility functions for MBOX Reader."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any


def parse_date(value: str | None) -> datetime | None:
    """Parse an RFC 2822 or ISO-8601 date string.

    Args:
        value: Raw date text, e.g. a Date header or a stored ISO timestamp.

    Returns:
        A timezone-aware UTC datetime, or None if the value is not a date.
        Naive values are taken to be UTC.
    """
    if not value or not value.strip():
        return None
    text = value.strip()

    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError, OverflowError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # Parses, but the UTC instant falls outside datetime's range.
        return None


def utc_now_iso() -> str:
    """Return the current time as an ISO-8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()


def date_sort_key(value: str | None) -> tuple[int, Any]:
    """Sort key for stored email dates.

    Parseable dates order chronologically and come first; anything else
    orders after them by its raw text.
    """
    parsed = parse_date(value)
    if parsed is not None:
        return (0, parsed)
    return (1, value or "")


__all__ = ["date_sort_key", "parse_date", "utc_now_iso"]
