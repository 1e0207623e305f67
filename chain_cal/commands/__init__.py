"""
Command implementations for chain-cal.
"""

from .show import MonthCommand, YearCommand
from .check import CheckCommand
from .streak import StreakCommand

__all__ = [
    'MonthCommand',
    'YearCommand',
    'CheckCommand',
    'StreakCommand',
]
