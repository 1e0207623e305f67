"""Analytics modules for streak tracking."""

from .streaks import StreakAnalyzer, StreakSummary

__all__ = ['StreakAnalyzer', 'StreakSummary']
