"""Date parsing utilities for catalog timestamps."""

from datetime import datetime
from typing import Optional

from dateutil.parser import parse as dateutil_parse


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an API timestamp.

    Handles formats like:
    - "2024-03-15T10:20:30Z"
    - "2024-03-15 10:20:30"
    - "15/03/2024"

    Args:
        value: Timestamp string

    Returns:
        Parsed datetime or None if parsing fails
    """
    if not value or not value.strip():
        return None

    value = value.strip()
    # ISO strings must not be read day-first
    dayfirst = "/" in value
    try:
        return dateutil_parse(value, dayfirst=dayfirst)
    except (ValueError, OverflowError):
        return None


def format_date_br(value: Optional[str]) -> str:
    """Format a timestamp in Brazilian style (dd/mm/yyyy).

    Args:
        value: Timestamp string

    Returns:
        "-" for an empty value, the raw value when it cannot be parsed,
        the formatted date otherwise
    """
    if not value:
        return "-"
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.strftime("%d/%m/%Y")
