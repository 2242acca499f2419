from typing import List, Optional

from ..schemas.habit import MilestoneInfo
from .utils.numbers import percentage

MILESTONES: List[int] = [7, 14, 21, 30, 60, 90, 180, 365]


def milestone_info(current_streak: int, best_streak: int) -> MilestoneInfo:
    next_milestone: Optional[int] = next((milestone for milestone in MILESTONES if milestone > current_streak), None)
    achieved = [milestone for milestone in MILESTONES if milestone <= best_streak]
    if next_milestone is None:
        return MilestoneInfo(
            nextMilestone=None,
            daysToNextMilestone=0,
            achievedMilestones=achieved,
            totalMilestones=len(MILESTONES),
            completionPercentage=100,
        )
    return MilestoneInfo(
        nextMilestone=next_milestone,
        daysToNextMilestone=next_milestone - current_streak,
        achievedMilestones=achieved,
        totalMilestones=len(MILESTONES),
        completionPercentage=percentage(current_streak, next_milestone),
    )
