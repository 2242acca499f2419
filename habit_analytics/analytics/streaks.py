import logging
from typing import Iterable, List, Sequence

from ..schemas.habit import Entry, StreakSegment, StreakSummary
from .entries import completed_only, index_by_date, select_habit_entries
from .utils.dates import EARLIEST_DAY, days_between, format_day, shift_day, shift_day_bounded, validate_day

logger = logging.getLogger(__name__)

EARLIEST = format_day(EARLIEST_DAY)


def _empty_summary() -> StreakSummary:
    return StreakSummary(current=0, best=0, total=0, streakHistory=[], isActive=False)


def _count_back(habit_entries: Iterable[Entry], reference_date: str) -> int:
    by_date = index_by_date(habit_entries)
    streak = 0
    cursor = reference_date
    while True:
        entry = by_date.get(cursor)
        # A missing day ends the run just like an explicit miss.
        if entry is None or not entry.completed:
            return streak
        streak += 1
        if cursor == EARLIEST:
            return streak
        cursor = shift_day(cursor, -1)


def _is_active(habit_entries: Iterable[Entry], reference_date: str) -> bool:
    by_date = index_by_date(habit_entries)
    for day in (reference_date, shift_day_bounded(reference_date, -1)):
        entry = by_date.get(day)
        if entry is not None and entry.completed:
            return True
    return False


def current_streak(entries: Iterable[Entry], habit_id: str, reference_date: str) -> int:
    reference_date = validate_day(reference_date)
    return _count_back(select_habit_entries(entries, habit_id), reference_date)


def best_streak(completed_entries: Sequence[Entry]) -> int:
    if not completed_entries:
        return 0
    best = 1
    run = 1
    for previous, entry in zip(completed_entries, completed_entries[1:]):
        if days_between(previous.date, entry.date) == 1:
            run += 1
            best = max(best, run)
        else:
            run = 1
    return best


def streak_history(completed_entries: Sequence[Entry]) -> List[StreakSegment]:
    if not completed_entries:
        return []
    segments: List[StreakSegment] = []
    start = end = completed_entries[0].date
    length = 1
    for previous, entry in zip(completed_entries, completed_entries[1:]):
        if days_between(previous.date, entry.date) == 1:
            end = entry.date
            length += 1
            continue
        segments.append(StreakSegment(start=start, end=end, length=length))
        start = end = entry.date
        length = 1
    segments.append(StreakSegment(start=start, end=end, length=length))
    return sorted(segments, key=lambda segment: segment.start, reverse=True)


def is_active(entries: Iterable[Entry], habit_id: str, reference_date: str) -> bool:
    reference_date = validate_day(reference_date)
    return _is_active(select_habit_entries(entries, habit_id), reference_date)


def streak_summary(entries: Iterable[Entry], habit_id: str, reference_date: str) -> StreakSummary:
    reference_date = validate_day(reference_date)
    habit_entries = select_habit_entries(entries, habit_id)
    if not habit_entries:
        return _empty_summary()
    completed = completed_only(habit_entries)
    summary = StreakSummary(
        current=_count_back(habit_entries, reference_date),
        best=best_streak(completed),
        total=len(completed),
        streakHistory=streak_history(completed),
        isActive=_is_active(habit_entries, reference_date),
    )
    logger.debug("streak summary for %s at %s: current=%d best=%d", habit_id, reference_date, summary.current, summary.best)
    return summary
