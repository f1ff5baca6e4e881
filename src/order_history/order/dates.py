"""Lenient parsing of the display dates carried by raw orders.

Raw orders store dates as display strings ("Sep 15, 2024"); a few sources send
ISO dates instead. Nothing here raises: an unparseable value is simply "no
date" / "no year".
"""

import re
from datetime import date, datetime

_YEAR_PATTERN = re.compile(r"20\d{2}")

_DATE_FORMATS = (
    "%b %d, %Y",  # Sep 15, 2024
    "%B %d, %Y",  # September 15, 2024
    "%Y-%m-%d",
    "%m/%d/%Y",
)


def extract_year(value: str | None) -> str | None:
    """Return the first 4-digit 20xx year in the string, or None."""
    if not value:
        return None
    match = _YEAR_PATTERN.search(value)
    return match.group(0) if match else None


def parse_order_date(value: str | None) -> date | None:
    if not value:
        return None
    cleaned = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        return None
