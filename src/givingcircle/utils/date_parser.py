"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Other absolute dates dateutil understands: "January 15, 2024"
    - Relative words: "today", "yesterday"

    Args:
        date_str: Date string
        today: Reference date for relative words (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
