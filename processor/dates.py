"""Calendar date parsing and display formatting."""
import logging
from datetime import date, datetime
from typing import Any, Optional

logger = logging.getLogger(__name__)

DATE_NOT_AVAILABLE = 'Date not available'


def parse_date(value: Any) -> Optional[date]:
    """
    Parse an ISO 8601 date string.

    Full ISO datetimes are accepted and their time of day is discarded.

    Args:
        value: Raw date value from a JSON document

    Returns:
        date object or None if the value is not a parsable date
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    # fromisoformat only accepts a "Z" suffix from Python 3.11
    if text[-1] in 'Zz':
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """
    Format a date for display, e.g. "May 10, 2025".

    Args:
        value: ISO date string or date object

    Returns:
        Display string, or "Date not available" for malformed input
    """
    parsed = value if isinstance(value, date) else parse_date(value)
    if parsed is None:
        return DATE_NOT_AVAILABLE
    return f"{parsed:%B} {parsed.day}, {parsed.year}"
