"""
Core data models for chain-cal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError
from .paths import get_path_manager


WEEK_STARTS = ("monday", "sunday")
CONFIG_KEYS = ("marks_path", "validate_dates", "week_start", "mark_symbol", "grace_days")


def _normalize_path(path: str) -> str:
    return os.path.abspath(os.path.expanduser(path))


@dataclass
class CalendarConfig:
    """Settings for the chain-cal command-line tool."""

    marks_path: Optional[str] = None
    validate_dates: bool = True
    week_start: str = "monday"
    mark_symbol: str = "X"
    grace_days: int = 1
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.marks_path is None:
            self.marks_path = str(get_path_manager().marks_path)
        else:
            self.marks_path = _normalize_path(self.marks_path)

        self.week_start = str(self.week_start).lower()
        if self.week_start not in WEEK_STARTS:
            raise ConfigurationError(
                f"week_start must be one of {', '.join(WEEK_STARTS)}, got {self.week_start!r}"
            )
        if self.grace_days < 0:
            raise ConfigurationError(f"grace_days must not be negative, got {self.grace_days}")
        if not self.mark_symbol:
            raise ConfigurationError("mark_symbol must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "marks_path": self.marks_path,
            "validate_dates": self.validate_dates,
            "week_start": self.week_start,
            "mark_symbol": self.mark_symbol,
            "grace_days": self.grace_days,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CalendarConfig:
        extra = {key: value for key, value in data.items() if key not in CONFIG_KEYS}
        try:
            grace_days = int(data.get("grace_days", 1))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"grace_days must be an integer: {exc}") from exc
        validate_dates = data.get("validate_dates", True)
        if not isinstance(validate_dates, bool):
            raise ConfigurationError(
                f"validate_dates must be true or false, got {validate_dates!r}"
            )
        return cls(
            marks_path=data.get("marks_path"),
            validate_dates=validate_dates,
            week_start=data.get("week_start", "monday"),
            mark_symbol=data.get("mark_symbol", "X"),
            grace_days=grace_days,
            extra=extra,
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> CalendarConfig:
        # utils.io imports chain_cal.core, so defer until first use
        from ..utils.io import safe_read_json

        data = safe_read_json(_normalize_path(config_path))
        if not data:
            return cls()

        return cls.from_dict(data)

    def save_to_file(self, config_path: str) -> None:
        from ..utils.io import safe_write_json

        config_path = _normalize_path(config_path)
        data = dict(self.extra)
        data.update(self.to_dict())
        if not safe_write_json(config_path, data):
            raise ConfigurationError(f"Could not write configuration to {config_path}")
