"""Abstract interface for marked-day calendars."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List


class Calendar(ABC):
    """
    A set of marked calendar days.

    Day identity is (year, month, day); any time-of-day or timezone carried
    by the argument is ignored.
    """

    @abstractmethod
    def mark(self, day: date) -> None:
        """Mark a day. Marking an already marked day is a no-op."""

    @abstractmethod
    def unmark(self, day: date) -> None:
        """Clear a mark. Clearing an unmarked day is a no-op."""

    @abstractmethod
    def is_marked(self, day: date) -> bool:
        """Return True if the day is marked."""

    @abstractmethod
    def get_month(self, year: int, month: int) -> List[datetime]:
        """Return the marked days of a month in ascending order."""

    @abstractmethod
    def get_year(self, year: int) -> List[datetime]:
        """Return the marked days of a year in ascending order."""

    @abstractmethod
    def marked_years(self) -> List[int]:
        """Return the years that have ever been marked, in ascending order."""
