from typing import Dict, List, Optional

from pydantic import BaseModel


class Entry(BaseModel):
    habitId: str
    date: str
    completed: bool
    currentValue: float = 0


class Habit(BaseModel):
    id: str
    name: str
    category: Optional[str] = None


class StreakSegment(BaseModel):
    start: str
    end: str
    length: int


class StreakSummary(BaseModel):
    current: int
    best: int
    total: int
    streakHistory: List[StreakSegment]
    isActive: bool


class CompletionPeriod(BaseModel):
    periodStart: str
    periodEnd: str
    label: str
    completedDays: int
    totalDays: int
    completionRate: int


class PeriodEntry(BaseModel):
    date: str
    completed: bool
    currentValue: float = 0


class WeeklyPeriod(CompletionPeriod):
    entries: List[PeriodEntry]


class MonthlyPeriod(CompletionPeriod):
    shortLabel: str


class MilestoneInfo(BaseModel):
    nextMilestone: Optional[int] = None
    daysToNextMilestone: int
    achievedMilestones: List[int]
    totalMilestones: int
    completionPercentage: int


class HabitReport(BaseModel):
    habitId: str
    referenceDate: str
    current: int
    best: int
    total: int
    isActive: bool
    consistencyScore: int
    milestones: MilestoneInfo
    streakHistory: List[StreakSegment]


class SummaryPeriod(BaseModel):
    start: str
    end: str
    days: int


class OverallStats(BaseModel):
    totalActiveHabits: int
    totalCompletions: int
    possibleCompletions: int
    completionRate: int


class HabitStat(BaseModel):
    habitId: str
    habitName: str
    category: Optional[str] = None
    completedDays: int
    completionRate: int


class CategoryStat(BaseModel):
    count: int
    totalRate: int
    averageRate: int


class AnalyticsSummary(BaseModel):
    period: SummaryPeriod
    overall: OverallStats
    bestHabit: Optional[HabitStat] = None
    categoryBreakdown: Dict[str, CategoryStat]
    habitStats: List[HabitStat]
