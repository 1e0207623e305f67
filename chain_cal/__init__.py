"""
chain-cal: compact marked-day calendar for habit streaks.
"""

from .calendar import Calendar, BinaryCalendar
from .analytics import StreakAnalyzer, StreakSummary
from .core import CalendarConfig, ChainCalError, InvalidDateError

__version__ = "1.0.0"

__all__ = [
    'Calendar',
    'BinaryCalendar',
    'StreakAnalyzer',
    'StreakSummary',
    'CalendarConfig',
    'ChainCalError',
    'InvalidDateError',
]
