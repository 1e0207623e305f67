"""Plain-text rendering of marked days, in the style of ``cal``."""

import calendar as _stdlib_calendar
from datetime import date
from typing import Iterable

from .base import Calendar
from ..utils.date import format_date


GRID_WIDTH = 20  # 7 cells of 2 chars plus 6 separators

FIRST_WEEKDAY = {
    "monday": _stdlib_calendar.MONDAY,
    "sunday": _stdlib_calendar.SUNDAY,
}


def _weekday_header(first_weekday: int) -> str:
    names = [_stdlib_calendar.day_abbr[(first_weekday + i) % 7][:2] for i in range(7)]
    return " ".join(names)


def render_month(store: Calendar, year: int, month: int,
                 week_start: str = "monday", symbol: str = "X") -> str:
    """
    Render one month as a grid with marked days replaced by ``symbol``.

    Args:
        store: Calendar to read marks from
        year: Year to render
        month: Month to render, 1-12
        week_start: "monday" or "sunday"
        symbol: Glyph drawn over marked days, at most two characters shown

    Returns:
        Multi-line string without a trailing newline
    """
    first_weekday = FIRST_WEEKDAY[week_start]
    layout = _stdlib_calendar.Calendar(firstweekday=first_weekday)
    marked = {d.day for d in store.get_month(year, month)}
    cell_symbol = symbol[:2].rjust(2)

    title = f"{_stdlib_calendar.month_name[month]} {year}"
    lines = [title.center(GRID_WIDTH).rstrip(), _weekday_header(first_weekday)]

    for week in layout.monthdayscalendar(year, month):
        cells = []
        for day in week:
            if day == 0:
                cells.append("  ")
            elif day in marked:
                cells.append(cell_symbol)
            else:
                cells.append(f"{day:2d}")
        lines.append(" ".join(cells).rstrip())

    return "\n".join(lines)


def render_year(store: Calendar, year: int,
                week_start: str = "monday", symbol: str = "X") -> str:
    """Render all twelve months of a year followed by a marked-day total."""
    months = [
        render_month(store, year, month, week_start=week_start, symbol=symbol)
        for month in range(1, 13)
    ]
    total = len(store.get_year(year))
    return "\n\n".join(months) + f"\n\nMarked: {total} days"


def render_day_list(days: Iterable[date]) -> str:
    """One ISO date per line."""
    return "\n".join(format_date(d) for d in days)
