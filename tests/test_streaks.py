"""
Tests for streak analytics (chain_cal/analytics/streaks.py).
"""

from datetime import date, timedelta

import pytest

from chain_cal.analytics import StreakAnalyzer, StreakSummary
from chain_cal.calendar import BinaryCalendar


def calendar_with(*ranges):
    c = BinaryCalendar()
    for start, end in ranges:
        current = start
        while current <= end:
            c.mark(current)
            current += timedelta(days=1)
    return c


@pytest.fixture
def two_runs():
    return calendar_with(
        (date(2024, 1, 1), date(2024, 1, 5)),
        (date(2024, 1, 10), date(2024, 1, 12)),
    )


class TestRuns:

    def test_runs(self, two_runs):
        assert StreakAnalyzer(two_runs).runs() == [
            (date(2024, 1, 1), date(2024, 1, 5)),
            (date(2024, 1, 10), date(2024, 1, 12)),
        ]

    def test_run_crosses_year_boundary(self):
        c = calendar_with((date(2023, 12, 30), date(2024, 1, 2)))

        assert StreakAnalyzer(c).runs() == [(date(2023, 12, 30), date(2024, 1, 2))]

    def test_empty_calendar(self):
        analyzer = StreakAnalyzer(BinaryCalendar())

        assert analyzer.runs() == []
        assert analyzer.longest_run() is None
        assert analyzer.get_streak(date(2024, 1, 1)) == StreakSummary(0, 0, None, 0)

    def test_iter_marked_skips_cleared_years(self):
        c = BinaryCalendar()
        c.mark(date(2020, 5, 5))
        c.unmark(date(2020, 5, 5))
        c.mark(date(2021, 5, 5))

        assert list(StreakAnalyzer(c).iter_marked()) == [date(2021, 5, 5)]

    def test_longest_run_prefers_earliest(self):
        c = calendar_with(
            (date(2024, 3, 1), date(2024, 3, 3)),
            (date(2024, 3, 10), date(2024, 3, 12)),
        )

        assert StreakAnalyzer(c).longest_run() == (date(2024, 3, 1), date(2024, 3, 3))


class TestGetStreak:

    def test_streak_ending_today(self, two_runs):
        summary = StreakAnalyzer(two_runs).get_streak(date(2024, 1, 12))

        assert summary.current == 3
        assert summary.best == 5
        assert summary.total == 8
        assert summary.last_marked == date(2024, 1, 12)

    def test_grace_day_keeps_streak(self, two_runs):
        summary = StreakAnalyzer(two_runs, grace_days=1).get_streak(date(2024, 1, 13))

        assert summary.current == 3

    def test_streak_broken_after_grace(self, two_runs):
        summary = StreakAnalyzer(two_runs, grace_days=1).get_streak(date(2024, 1, 14))

        assert summary.current == 0
        assert summary.best == 5

    def test_no_grace(self, two_runs):
        summary = StreakAnalyzer(two_runs, grace_days=0).get_streak(date(2024, 1, 13))

        assert summary.current == 0

    def test_future_marks_not_current(self, two_runs):
        summary = StreakAnalyzer(two_runs).get_streak(date(2024, 1, 3))

        assert summary.current == 3
        assert summary.best == 5

    def test_today_before_all_marks(self, two_runs):
        assert StreakAnalyzer(two_runs).get_streak(date(2023, 12, 1)).current == 0

    def test_negative_grace_rejected(self):
        with pytest.raises(ValueError):
            StreakAnalyzer(BinaryCalendar(), grace_days=-1)


class TestCalendarInterface:

    def test_marked_years_is_part_of_interface(self):
        from chain_cal.calendar import Calendar

        assert "marked_years" in Calendar.__abstractmethods__
