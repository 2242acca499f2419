import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from ..schemas.habit import (
    AnalyticsSummary,
    CategoryStat,
    Entry,
    Habit,
    HabitReport,
    HabitStat,
    OverallStats,
    SummaryPeriod,
)
from .consistency import consistency_score
from .entries import count_between, count_completed_between, select_habit_entries
from .milestones import milestone_info
from .streaks import streak_summary
from .utils.dates import shift_day_bounded, validate_day
from .utils.numbers import percentage, round_half_up

logger = logging.getLogger(__name__)

UNCATEGORIZED = "uncategorized"


def habit_report(entries: Sequence[Entry], habit_id: str, reference_date: str, history_limit: int = 10) -> HabitReport:
    reference_date = validate_day(reference_date)
    summary = streak_summary(entries, habit_id, reference_date)
    return HabitReport(
        habitId=habit_id,
        referenceDate=reference_date,
        current=summary.current,
        best=summary.best,
        total=summary.total,
        isActive=summary.isActive,
        consistencyScore=consistency_score(entries, habit_id, reference_date),
        milestones=milestone_info(summary.current, summary.best),
        streakHistory=summary.streakHistory[: max(history_limit, 0)],
    )


def _habit_stat(habit: Habit, completed: int, window_days: int) -> HabitStat:
    return HabitStat(
        habitId=habit.id,
        habitName=habit.name,
        category=habit.category,
        completedDays=completed,
        completionRate=percentage(completed, window_days),
    )


def _category_breakdown(stats: Iterable[HabitStat]) -> Dict[str, CategoryStat]:
    totals: Dict[str, List[int]] = defaultdict(list)
    for stat in stats:
        totals[stat.category or UNCATEGORIZED].append(stat.completionRate)
    return {
        category: CategoryStat(
            count=len(rates),
            totalRate=sum(rates),
            averageRate=round_half_up(sum(rates) / len(rates)),
        )
        for category, rates in totals.items()
    }


def _best_habit(stats: Iterable[HabitStat]) -> Optional[HabitStat]:
    best: Optional[HabitStat] = None
    for stat in stats:
        if stat.completionRate > (best.completionRate if best else 0):
            best = stat
    return best


def analytics_summary(
    entries: Sequence[Entry],
    habits: Sequence[Habit],
    reference_date: str,
    window_days: int = 30,
) -> AnalyticsSummary:
    """Completion overview across habits for the trailing window.

    Habits without a single entry in the window are left out entirely.
    """
    reference_date = validate_day(reference_date)
    window_start = shift_day_bounded(reference_date, -(window_days - 1))

    stats: List[HabitStat] = []
    for habit in habits:
        habit_entries = select_habit_entries(entries, habit.id)
        if not count_between(habit_entries, window_start, reference_date):
            continue
        completed = count_completed_between(habit_entries, window_start, reference_date)
        stats.append(_habit_stat(habit, completed, window_days))

    total_completions = sum(stat.completedDays for stat in stats)
    possible = len(stats) * window_days
    logger.debug("summary over %d habits (%s..%s)", len(stats), window_start, reference_date)
    return AnalyticsSummary(
        period=SummaryPeriod(start=window_start, end=reference_date, days=window_days),
        overall=OverallStats(
            totalActiveHabits=len(stats),
            totalCompletions=total_completions,
            possibleCompletions=possible,
            completionRate=percentage(total_completions, possible),
        ),
        bestHabit=_best_habit(stats),
        categoryBreakdown=_category_breakdown(stats),
        habitStats=stats,
    )
