from typing import Iterable, List

from ..schemas.habit import Entry, MonthlyPeriod, PeriodEntry, WeeklyPeriod
from .entries import count_completed_between, select_habit_entries
from .utils.dates import (
    days_since_earliest,
    month_bounds,
    month_label,
    month_short_label,
    shift_day,
    shift_day_bounded,
    shift_month,
    validate_day,
    week_label,
)
from .utils.numbers import percentage

DAYS_PER_WEEK = 7


def _entries_between(habit_entries: Iterable[Entry], start: str, end: str) -> List[PeriodEntry]:
    return [
        PeriodEntry(date=entry.date, completed=entry.completed, currentValue=entry.currentValue)
        for entry in habit_entries
        if start <= entry.date <= end
    ]


def weekly_patterns(entries: Iterable[Entry], habit_id: str, weeks: int, reference_date: str) -> List[WeeklyPeriod]:
    """Rolling 7-day windows ending at reference_date, oldest first.

    Every window is scored against 7 days, even when the habit started
    part-way through it.
    """
    reference_date = validate_day(reference_date)
    habit_entries = select_habit_entries(entries, habit_id)
    oldest_offset = min(weeks - 1, days_since_earliest(reference_date) // DAYS_PER_WEEK)
    periods: List[WeeklyPeriod] = []
    for offset in range(oldest_offset, -1, -1):
        period_end = shift_day(reference_date, -offset * DAYS_PER_WEEK)
        period_start = shift_day_bounded(period_end, -(DAYS_PER_WEEK - 1))
        completed = count_completed_between(habit_entries, period_start, period_end)
        periods.append(
            WeeklyPeriod(
                periodStart=period_start,
                periodEnd=period_end,
                label=week_label(period_start),
                completedDays=completed,
                totalDays=DAYS_PER_WEEK,
                completionRate=percentage(completed, DAYS_PER_WEEK),
                entries=_entries_between(habit_entries, period_start, period_end),
            )
        )
    return periods


def monthly_patterns(entries: Iterable[Entry], habit_id: str, months: int, reference_date: str) -> List[MonthlyPeriod]:
    """Calendar months up to and including the reference month, oldest first."""
    reference_date = validate_day(reference_date)
    habit_entries = select_habit_entries(entries, habit_id)
    year, month = shift_month(reference_date, 0)
    oldest_offset = min(months - 1, (year - 1) * 12 + month - 1)
    periods: List[MonthlyPeriod] = []
    for offset in range(oldest_offset, -1, -1):
        year, month = shift_month(reference_date, -offset)
        period_start, period_end = month_bounds(year, month)
        total_days = int(period_end[-2:])
        completed = count_completed_between(habit_entries, period_start, period_end)
        periods.append(
            MonthlyPeriod(
                periodStart=period_start,
                periodEnd=period_end,
                label=month_label(year, month),
                shortLabel=month_short_label(month),
                completedDays=completed,
                totalDays=total_days,
                completionRate=percentage(completed, total_days),
            )
        )
    return periods
