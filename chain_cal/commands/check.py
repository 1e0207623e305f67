"""Check whether a single day is marked."""

import logging
from typing import Optional

from ..core.exceptions import ChainCalError
from ..core.models import CalendarConfig
from ..utils.date import format_date, parse_date
from .common import build_calendar


class CheckCommand:
    """Command for testing one day."""

    def __init__(self, config: CalendarConfig, marks_path: Optional[str] = None,
                 verbose: bool = False):
        self.config = config
        self.marks_path = marks_path
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, date_str: str) -> bool:
        """
        Report whether a day is marked.

        Returns:
            True if the day is marked, False if it is not or on error
        """
        day = parse_date(date_str)
        if day is None:
            print(f"Error: not a date: {date_str!r} (expected YYYY-MM-DD).")
            return False

        try:
            calendar = build_calendar(self.config, self.marks_path, logger=self.logger)
        except ChainCalError as exc:
            self.logger.error("Check command failed: %s", exc)
            print(f"Error: {exc}")
            return False

        marked = calendar.is_marked(day)
        print(f"{format_date(day)}: {'marked' if marked else 'not marked'}")
        return marked
