from typing import Dict, Iterable, List

from ..schemas.habit import Entry
from .utils.dates import parse_day


def select_habit_entries(entries: Iterable[Entry], habit_id: str) -> List[Entry]:
    """Entries of one habit, one per day (last wins), oldest first.

    Dates are validated here so a malformed day fails the whole computation
    instead of silently sorting out of place.
    """
    by_date: Dict[str, Entry] = {}
    for entry in entries:
        if entry.habitId != habit_id:
            continue
        parse_day(entry.date)
        by_date[entry.date] = entry
    return [by_date[day] for day in sorted(by_date)]


def index_by_date(habit_entries: Iterable[Entry]) -> Dict[str, Entry]:
    return {entry.date: entry for entry in habit_entries}


def completed_only(habit_entries: Iterable[Entry]) -> List[Entry]:
    return [entry for entry in habit_entries if entry.completed]


def count_completed_between(habit_entries: Iterable[Entry], start: str, end: str) -> int:
    return sum(1 for entry in habit_entries if entry.completed and start <= entry.date <= end)


def count_between(habit_entries: Iterable[Entry], start: str, end: str) -> int:
    return sum(1 for entry in habit_entries if start <= entry.date <= end)
