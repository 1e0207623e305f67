"""
Streak calculation over a marked-day calendar.

A streak (or run) is a maximal sequence of consecutive marked days. The
current streak is the run ending closest to "today", provided it ended no
more than ``grace_days`` ago, so that a chain is not reported broken before
the day is over.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterator, List, Optional, Tuple

from ..calendar.base import Calendar


@dataclass
class StreakSummary:
    """Current and best streak, in days."""
    current: int
    best: int
    last_marked: Optional[date]
    total: int


class StreakAnalyzer:
    """Computes runs and streaks from a Calendar."""

    def __init__(self, calendar: Calendar, grace_days: int = 1,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize streak analyzer.

        Args:
            calendar: Calendar holding the marks
            grace_days: How many days the current streak may trail today
            logger: Optional logger
        """
        if grace_days < 0:
            raise ValueError(f"grace_days must not be negative, got {grace_days}")
        self.calendar = calendar
        self.grace_days = grace_days
        self.logger = logger or logging.getLogger(__name__)

    def iter_marked(self) -> Iterator[date]:
        """Yield every marked day in chronological order."""
        for year in self.calendar.marked_years():
            for day in self.calendar.get_year(year):
                yield day.date()

    def runs(self) -> List[Tuple[date, date]]:
        """Return (start, end) pairs of consecutive marked days, both inclusive."""
        result: List[Tuple[date, date]] = []
        start = end = None

        for day in self.iter_marked():
            if end is not None and (day - end).days == 1:
                end = day
                continue
            if start is not None:
                result.append((start, end))
            start = end = day

        if start is not None:
            result.append((start, end))

        return result

    def get_streak(self, today: Optional[date] = None) -> StreakSummary:
        """
        Calculate current and best streak.

        Marks after ``today`` count towards the best streak but not the
        current one.

        Args:
            today: Reference day, defaults to the current UTC date

        Returns:
            StreakSummary
        """
        if today is None:
            today = datetime.now(timezone.utc).date()

        runs = self.runs()
        if not runs:
            return StreakSummary(current=0, best=0, last_marked=None, total=0)

        best = max((end - start).days + 1 for start, end in runs)
        total = sum((end - start).days + 1 for start, end in runs)
        last_marked = runs[-1][1]

        current = 0
        started = [(start, min(end, today)) for start, end in runs if start <= today]
        if started:
            start, end = started[-1]
            if (today - end).days <= self.grace_days:
                current = (end - start).days + 1

        self.logger.debug(f"Streak as of {today}: current={current}, best={best}, runs={len(runs)}")

        return StreakSummary(current=current, best=best, last_marked=last_marked, total=total)

    def longest_run(self) -> Optional[Tuple[date, date]]:
        """Return the earliest of the longest runs, or None when nothing is marked."""
        runs = self.runs()
        if not runs:
            return None
        return max(runs, key=lambda run: (run[1] - run[0]).days)
