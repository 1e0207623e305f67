"""Calendar module: marked-day storage and text rendering."""

from .base import Calendar
from .binary import BinaryCalendar
from .render import render_month, render_year, render_day_list

__all__ = ['Calendar', 'BinaryCalendar', 'render_month', 'render_year', 'render_day_list']
