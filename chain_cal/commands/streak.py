"""Streak command - report current and best chain of marked days."""

import logging
from typing import Optional

from ..analytics.streaks import StreakAnalyzer
from ..core.exceptions import ChainCalError
from ..core.models import CalendarConfig
from ..utils.date import format_date, parse_date
from .common import build_calendar


class StreakCommand:
    """Command for reporting streaks."""

    def __init__(self, config: CalendarConfig, marks_path: Optional[str] = None,
                 verbose: bool = False):
        self.config = config
        self.marks_path = marks_path
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, today_str: Optional[str] = None) -> bool:
        """
        Print the current and best streak.

        Args:
            today_str: Reference day (YYYY-MM-DD), defaults to today in UTC

        Returns:
            True if successful, False otherwise
        """
        today = None
        if today_str:
            today = parse_date(today_str)
            if today is None:
                print(f"Error: not a date: {today_str!r} (expected YYYY-MM-DD).")
                return False

        try:
            calendar = build_calendar(self.config, self.marks_path, logger=self.logger)
        except ChainCalError as exc:
            self.logger.error("Streak command failed: %s", exc)
            print(f"Error: {exc}")
            return False

        analyzer = StreakAnalyzer(calendar, grace_days=self.config.grace_days, logger=self.logger)
        summary = analyzer.get_streak(today)

        print(f"Current streak: {summary.current} days")
        best_run = analyzer.longest_run()
        if best_run:
            start, end = best_run
            print(f"Best streak:    {summary.best} days ({format_date(start)} to {format_date(end)})")
        else:
            print(f"Best streak:    {summary.best} days")
        print(f"Marked days:    {summary.total}")
        if summary.last_marked:
            print(f"Last marked:    {format_date(summary.last_marked)}")
        return True
