"""
Utility functions for chain-cal.
"""

from .io import safe_read_json, safe_write_json, atomic_write, read_marks
from .date import parse_date, format_date, utc_midnight, iter_days

__all__ = [
    # I/O utilities
    'safe_read_json',
    'safe_write_json',
    'atomic_write',
    'read_marks',
    # Date utilities
    'parse_date',
    'format_date',
    'utc_midnight',
    'iter_days'
]
