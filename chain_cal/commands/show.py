"""Month and year views of the marked days."""

import logging
from datetime import MAXYEAR, MINYEAR
from typing import Optional

from ..calendar.render import render_day_list, render_month, render_year
from ..core.exceptions import ChainCalError
from ..core.models import CalendarConfig
from .common import build_calendar


def _year_in_range(year: int) -> bool:
    if MINYEAR <= year <= MAXYEAR:
        return True
    print(f"Error: year must be between {MINYEAR} and {MAXYEAR}, got {year}.")
    return False


class MonthCommand:
    """Command for showing one month."""

    def __init__(self, config: CalendarConfig, marks_path: Optional[str] = None,
                 verbose: bool = False):
        self.config = config
        self.marks_path = marks_path
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, year: int, month: int, as_list: bool = False) -> bool:
        """
        Print a month grid, or the marked days as a list.

        Args:
            year: Year to show
            month: Month to show, 1-12
            as_list: Print ISO dates instead of a grid

        Returns:
            True if successful, False otherwise
        """
        if not _year_in_range(year):
            return False
        if not 1 <= month <= 12:
            print(f"Error: month must be between 1 and 12, got {month}.")
            return False

        try:
            calendar = build_calendar(self.config, self.marks_path, logger=self.logger)
        except ChainCalError as exc:
            self.logger.error("Month command failed: %s", exc)
            print(f"Error: {exc}")
            return False

        if as_list:
            output = render_day_list(calendar.get_month(year, month))
        else:
            output = render_month(
                calendar, year, month,
                week_start=self.config.week_start,
                symbol=self.config.mark_symbol,
            )

        if output:
            print(output)
        return True


class YearCommand:
    """Command for showing a whole year."""

    def __init__(self, config: CalendarConfig, marks_path: Optional[str] = None,
                 verbose: bool = False):
        self.config = config
        self.marks_path = marks_path
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, year: int, as_list: bool = False) -> bool:
        """Print twelve month grids, or the marked days of the year as a list."""
        if not _year_in_range(year):
            return False

        try:
            calendar = build_calendar(self.config, self.marks_path, logger=self.logger)
        except ChainCalError as exc:
            self.logger.error("Year command failed: %s", exc)
            print(f"Error: {exc}")
            return False

        if as_list:
            output = render_day_list(calendar.get_year(year))
        else:
            output = render_year(
                calendar, year,
                week_start=self.config.week_start,
                symbol=self.config.mark_symbol,
            )

        if output:
            print(output)
        return True
