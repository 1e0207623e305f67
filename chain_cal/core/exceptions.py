"""
Exception classes for chain-cal.
"""


class ChainCalError(Exception):
    """Base exception for all chain-cal errors."""
    pass


class InvalidDateError(ChainCalError, ValueError):
    """Raised when a day does not exist in the given month."""
    pass


class ConfigurationError(ChainCalError):
    """Raised when configuration is invalid."""
    pass


class InputError(ChainCalError):
    """Raised when a marks file cannot be read or parsed."""
    pass
