from typing import Iterable

from ..schemas.habit import Entry
from .entries import count_between, count_completed_between, select_habit_entries
from .streaks import current_streak
from .utils.dates import shift_day_bounded, validate_day
from .utils.numbers import round_half_up

WINDOW_DAYS = 30
RECENT_DAYS = 7

COMPLETION_WEIGHT = 0.4
STREAK_WEIGHT = 0.3
RECENT_WEIGHT = 0.3


def consistency_score(entries: Iterable[Entry], habit_id: str, reference_date: str) -> int:
    """Blend 30-day completion, streak health and 7-day activity into 0-100."""
    reference_date = validate_day(reference_date)
    habit_entries = select_habit_entries(entries, habit_id)
    window_start = shift_day_bounded(reference_date, -(WINDOW_DAYS - 1))
    if not count_between(habit_entries, window_start, reference_date):
        return 0

    completion_rate = count_completed_between(habit_entries, window_start, reference_date) / WINDOW_DAYS * 100
    streak = current_streak(habit_entries, habit_id, reference_date)
    streak_consistency = min(streak / WINDOW_DAYS * 100, 100)
    recent_start = shift_day_bounded(reference_date, -(RECENT_DAYS - 1))
    recent_activity = count_completed_between(habit_entries, recent_start, reference_date) / RECENT_DAYS * 100

    score = (
        completion_rate * COMPLETION_WEIGHT
        + streak_consistency * STREAK_WEIGHT
        + recent_activity * RECENT_WEIGHT
    )
    return max(0, min(100, round_half_up(score)))
