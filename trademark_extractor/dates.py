"""
Date normalization for TSDR documents.

Dates arrive either hyphenated with a trailing UTC offset (2018-04-03-04:00)
or compact (20180402), depending on which USPTO subsystem produced the field.
"""

from datetime import date, datetime
from typing import Optional


def normalize_date(raw: Optional[str]) -> Optional[str]:
    """
    Convert a TSDR date string to YYYY-MM-DD.

    Args:
        raw: Date text as found in the document

    Returns:
        Normalized date, the input unchanged if the format is not recognized,
        or None for empty input
    """
    if not raw:
        return None

    if '-' in raw:
        # Format: 2018-04-03-04:00
        parts = raw.split('-')
        if len(parts) >= 3:
            return '-'.join(parts[:3])
    elif len(raw) == 8 and raw.isdigit():
        # Format: 20180402
        return f"{raw[:4]}-{raw[4:6]}-{raw[6:]}"

    return raw


# Layouts still seen after normalization; anything else is left unparsed
DATE_FORMATS = ('%Y-%m-%d', '%m/%d/%Y', '%Y/%m/%d')


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a (normalized) date string for comparison.

    Args:
        value: Date text, usually the output of normalize_date

    Returns:
        The calendar date, or None when the text matches no known layout
    """
    if not value:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    return None
