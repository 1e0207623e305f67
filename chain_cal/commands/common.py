"""Helpers shared by the chain-cal commands."""

import logging
from typing import Optional

from ..calendar.binary import BinaryCalendar
from ..core.models import CalendarConfig
from ..utils.io import read_marks


def build_calendar(config: CalendarConfig, marks_path: Optional[str] = None,
                   logger: Optional[logging.Logger] = None) -> BinaryCalendar:
    """
    Build a calendar from a marks file.

    All marks are applied before any unmarks.

    Args:
        config: Loaded configuration
        marks_path: Marks file, defaults to config.marks_path
        logger: Optional logger

    Returns:
        Populated BinaryCalendar
    """
    logger = logger or logging.getLogger(__name__)
    path = marks_path or config.marks_path

    marks, unmarks = read_marks(path)

    calendar = BinaryCalendar(validate=config.validate_dates, logger=logger)
    for day in marks:
        calendar.mark(day)
    for day in unmarks:
        calendar.unmark(day)

    logger.info(f"Loaded {len(marks)} marks and {len(unmarks)} unmarks from {path}")
    return calendar
