import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ..analytics.consistency import consistency_score
from ..analytics.milestones import milestone_info
from ..analytics.periods import monthly_patterns, weekly_patterns
from ..analytics.report import analytics_summary, habit_report
from ..analytics.utils.dates import InvalidDateError, validate_day
from ..config import settings
from ..schemas.habit import Entry, Habit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/habits/analytics", tags=["analytics"])


def _bad_request(detail: str) -> HTTPException:
    logger.warning("rejected analytics request: %s", detail)
    return HTTPException(status_code=400, detail=detail)


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _first_present(body: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if body.get(key) is not None:
            return body[key]
    return None


def _reference_date(body: Dict[str, Any]) -> str:
    value = _first_present(body, "referenceDate", "reference_date")
    if value is None:
        return _today()
    try:
        return validate_day(value)
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error


def _habit_id(body: Dict[str, Any]) -> str:
    habit_id = _first_present(body, "habitId", "habit_id")
    if not isinstance(habit_id, str) or not habit_id:
        raise _bad_request("habitId required")
    return habit_id


def _parse_entries(body: Dict[str, Any]) -> List[Entry]:
    raw = body.get("entries")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise _bad_request("entries must be a list")
    try:
        return [Entry.model_validate(item) for item in raw]
    except ValidationError as error:
        raise _bad_request(f"invalid entry: {error.errors()[0].get('msg')}") from error


def _parse_habits(body: Dict[str, Any]) -> List[Habit]:
    raw = body.get("habits")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise _bad_request("habits must be a list")
    try:
        return [Habit.model_validate(item) for item in raw]
    except ValidationError as error:
        raise _bad_request(f"invalid habit: {error.errors()[0].get('msg')}") from error


def _count_param(body: Dict[str, Any], name: str, default: int, maximum: Optional[int] = None) -> int:
    value = body.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _bad_request(f"{name} must be a non-negative integer")
    return value if maximum is None else min(value, maximum)


@router.post("/streaks")
async def streaks(body: Dict[str, Any]) -> Dict[str, Any]:
    habit_id = _habit_id(body)
    entries = _parse_entries(body)
    try:
        report = habit_report(entries, habit_id, _reference_date(body), settings.HISTORY_LIMIT)
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error
    logger.info("streak report for %s: current=%d best=%d", habit_id, report.current, report.best)
    return report.model_dump()


@router.post("/weekly")
async def weekly(body: Dict[str, Any]) -> Dict[str, Any]:
    habit_id = _habit_id(body)
    entries = _parse_entries(body)
    weeks = _count_param(body, "weeks", settings.DEFAULT_WEEKS, settings.MAX_PERIODS)
    try:
        periods = weekly_patterns(entries, habit_id, weeks, _reference_date(body))
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error
    return {"results": len(periods), "data": [period.model_dump() for period in periods]}


@router.post("/monthly")
async def monthly(body: Dict[str, Any]) -> Dict[str, Any]:
    habit_id = _habit_id(body)
    entries = _parse_entries(body)
    months = _count_param(body, "months", settings.DEFAULT_MONTHS, settings.MAX_PERIODS)
    try:
        periods = monthly_patterns(entries, habit_id, months, _reference_date(body))
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error
    return {"results": len(periods), "data": [period.model_dump() for period in periods]}


@router.post("/consistency")
async def consistency(body: Dict[str, Any]) -> Dict[str, Any]:
    habit_id = _habit_id(body)
    entries = _parse_entries(body)
    try:
        score = consistency_score(entries, habit_id, _reference_date(body))
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error
    return {"habitId": habit_id, "consistencyScore": score}


@router.post("/milestones")
async def milestones(body: Dict[str, Any]) -> Dict[str, Any]:
    current = _count_param(body, "currentStreak", 0)
    best = _count_param(body, "bestStreak", current)
    return milestone_info(current, best).model_dump()


@router.post("/summary")
async def summary(body: Dict[str, Any]) -> Dict[str, Any]:
    habits = _parse_habits(body)
    entries = _parse_entries(body)
    try:
        result = analytics_summary(entries, habits, _reference_date(body), settings.SUMMARY_WINDOW_DAYS)
    except InvalidDateError as error:
        raise _bad_request(str(error)) from error
    return result.model_dump()
