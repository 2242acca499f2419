import pathlib
import sys
from typing import Iterable, List

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from habit_analytics.schemas.habit import Entry  # noqa: E402


def make_entries(habit_id: str, completed: Iterable[str] = (), missed: Iterable[str] = ()) -> List[Entry]:
    entries = [Entry(habitId=habit_id, date=day, completed=True, currentValue=1) for day in completed]
    entries.extend(Entry(habitId=habit_id, date=day, completed=False) for day in missed)
    return entries
