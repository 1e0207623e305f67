"""
Tests for text rendering (chain_cal/calendar/render.py).
"""

from datetime import date

from chain_cal.calendar import BinaryCalendar, render_day_list, render_month, render_year


def test_render_month_monday_first():
    c = BinaryCalendar()
    c.mark(date(2016, 3, 1))
    c.mark(date(2016, 3, 31))

    lines = render_month(c, 2016, 3).split("\n")

    assert lines[0] == "     March 2016"
    assert lines[1] == "Mo Tu We Th Fr Sa Su"
    assert lines[2] == "    X  2  3  4  5  6"
    assert lines[-1] == "28 29 30  X"


def test_render_month_sunday_first_and_symbol():
    c = BinaryCalendar()
    c.mark(date(2016, 3, 5))

    lines = render_month(c, 2016, 3, week_start="sunday", symbol="#").split("\n")

    assert lines[1] == "Su Mo Tu We Th Fr Sa"
    assert lines[2] == "       1  2  3  4  #"


def test_render_month_without_marks():
    lines = render_month(BinaryCalendar(), 2021, 2).split("\n")

    assert lines[2] == " 1  2  3  4  5  6  7"
    assert lines[-1] == "22 23 24 25 26 27 28"


def test_render_year_footer():
    c = BinaryCalendar()
    c.mark(date(2006, 1, 1))
    c.mark(date(2006, 12, 31))

    output = render_year(c, 2006)

    assert output.startswith("    January 2006")
    assert "   December 2006" in output
    assert output.endswith("Marked: 2 days")
    assert output.count("Mo Tu We Th Fr Sa Su") == 12


def test_render_day_list():
    c = BinaryCalendar()
    c.mark(date(2006, 2, 15))
    c.mark(date(2006, 2, 1))

    assert render_day_list(c.get_month(2006, 2)) == "2006-02-01\n2006-02-15"
    assert render_day_list([]) == ""
