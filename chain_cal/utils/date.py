"""
Date parsing and formatting utilities.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Optional


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """
    Parse a date string into a date object.
    
    Handles various formats:
    - ISO format (YYYY-MM-DD)
    - ISO datetime (YYYY-MM-DDTHH:MM:SS), date part only
    - Non-padded month/day (YYYY-M-D)
    
    Args:
        date_str: Date string to parse
    
    Returns:
        Parsed date object or None if invalid
    """
    if not date_str:
        return None

    date_str = date_str.strip()

    # Take only date part if it's a datetime string
    if 'T' in date_str:
        date_str = date_str.split('T')[0]
    
    # Remove timezone if present
    date_str = date_str.split('+')[0].split('Z')[0]
    
    try:
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        pass
    
    try:
        parts = date_str.split('-')
        if len(parts) == 3:
            year = int(parts[0])
            month = int(parts[1])
            day = int(parts[2])
            return date(year, month, day)
    except (ValueError, IndexError):
        pass
    
    return None


def format_date(d: Optional[date]) -> Optional[str]:
    """
    Format a date object as ISO string (YYYY-MM-DD).
    
    Args:
        d: Date object to format
    
    Returns:
        ISO formatted date string or None
    """
    if not d:
        return None
    
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def utc_midnight(year: int, month: int, day: int) -> datetime:
    """Return midnight UTC of the given day."""
    return datetime(year, month, day, tzinfo=timezone.utc)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
