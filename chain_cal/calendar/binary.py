"""
Bitmask-backed marked-day calendar.

Each year that has ever been marked owns a list of twelve month masks.
Bit ``i`` of a mask is set when day ``i + 1`` of that month is marked, so
only bits 0-30 are ever used.
"""

import calendar as _stdlib_calendar
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from .base import Calendar
from ..core.exceptions import InvalidDateError
from ..utils.date import utc_midnight


MONTHS_PER_YEAR = 12
MAX_DAYS_PER_MONTH = 31


class BinaryCalendar(Calendar):
    """Calendar storing one 32-bit mask per (year, month)."""

    def __init__(self, validate: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize an empty calendar.

        Args:
            validate: Reject days that do not exist in their month with
                      InvalidDateError instead of trusting the caller.
            logger: Optional logger, defaults to the module logger.
        """
        self.validate = validate
        self.logger = logger or logging.getLogger(__name__)
        self._marked: Dict[int, List[int]] = {}

    def _locate(self, day: date):
        """Return (year, month index, bit) for a date-like value."""
        year, month, dom = day.year, day.month, day.day
        if self.validate:
            self._check_day(year, month, dom)
        return year, month - 1, 1 << (dom - 1)

    @staticmethod
    def _check_month(month: int) -> None:
        if not 1 <= month <= MONTHS_PER_YEAR:
            raise InvalidDateError(f"Month {month} is outside 1-{MONTHS_PER_YEAR}")

    def _check_day(self, year: int, month: int, dom: int) -> None:
        self._check_month(month)
        # monthrange only supports years 1-9999; the rule below covers the rest
        leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        length = _stdlib_calendar.mdays[month] + (1 if month == 2 and leap else 0)
        if not 1 <= dom <= length:
            raise InvalidDateError(f"Day {dom} does not exist in {year:04d}-{month:02d}")

    def mark(self, day: date) -> None:
        year, month_index, bit = self._locate(day)

        if year not in self._marked:
            self.logger.debug(f"Allocating masks for year {year}")
            self._marked[year] = [0] * MONTHS_PER_YEAR

        self._marked[year][month_index] |= bit

    def unmark(self, day: date) -> None:
        year, month_index, bit = self._locate(day)

        masks = self._marked.get(year)
        if masks is None:
            return

        masks[month_index] &= ~bit

    def is_marked(self, day: date) -> bool:
        year, month_index, bit = self._locate(day)

        masks = self._marked.get(year)
        if masks is None:
            return False

        return masks[month_index] & bit == bit

    def get_month(self, year: int, month: int) -> List[datetime]:
        if self.validate:
            self._check_month(month)

        masks = self._marked.get(year)
        if masks is None:
            return []

        return self._format_days(year, month, masks[month - 1])

    def get_year(self, year: int) -> List[datetime]:
        masks = self._marked.get(year)
        if masks is None:
            return []

        result: List[datetime] = []
        for month_index, mask in enumerate(masks):
            result.extend(self._format_days(year, month_index + 1, mask))
        return result

    def get_mask(self, year: int, month: int) -> int:
        """Return the raw day mask for a month, 0 if the year was never marked."""
        masks = self._marked.get(year)
        if masks is None:
            return 0
        return masks[month - 1]

    def marked_years(self) -> List[int]:
        """Return the years that have allocated masks, in ascending order."""
        return sorted(self._marked)

    def count(self, year: int, month: Optional[int] = None) -> int:
        """Count marked days in a month, or in the whole year when month is None."""
        masks = self._marked.get(year)
        if masks is None:
            return 0
        if month is not None:
            return bin(masks[month - 1]).count("1")
        return sum(bin(mask).count("1") for mask in masks)

    @staticmethod
    def _format_days(year: int, month: int, days: int) -> List[datetime]:
        """Decode a month mask into ascending UTC-midnight datetimes."""
        result: List[datetime] = []

        if days == 0:
            return result

        # bit_length() - 1 is the index of the highest set bit
        for i in range(days.bit_length()):
            if days & (1 << i):
                result.append(utc_midnight(year, month, i + 1))

        return result
