"""
Core module for chain-cal - contains configuration, paths and exceptions.
"""

from .models import CalendarConfig

from .exceptions import (
    ChainCalError,
    InvalidDateError,
    ConfigurationError,
    InputError
)

__all__ = [
    # Models
    'CalendarConfig',
    # Exceptions
    'ChainCalError',
    'InvalidDateError',
    'ConfigurationError',
    'InputError'
]
