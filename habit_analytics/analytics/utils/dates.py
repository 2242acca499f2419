import calendar
import re
from datetime import date, datetime, timedelta
from typing import Tuple, Union

DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
EARLIEST_DAY = date.min
LATEST_DAY = date.max

DayLike = Union[str, date]


class InvalidDateError(ValueError):
    """Raised when a value is not a YYYY-MM-DD calendar day."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid calendar day: {value!r} (expected YYYY-MM-DD)")
        self.value = value


def parse_day(value: DayLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not DAY_PATTERN.match(value):
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError as error:
        raise InvalidDateError(value) from error


def format_day(value: date) -> str:
    return value.isoformat()


def validate_day(value: DayLike) -> str:
    return format_day(parse_day(value))


def shift_day(value: DayLike, days: int) -> str:
    day = parse_day(value)
    try:
        return format_day(day + timedelta(days=days))
    except OverflowError as error:
        raise InvalidDateError(f"{format_day(day)} shifted by {days} days") from error


def shift_day_bounded(value: DayLike, days: int) -> str:
    """Like shift_day, but stops at the first and last representable day."""
    day = parse_day(value)
    if days < 0 and (day - EARLIEST_DAY).days < -days:
        return format_day(EARLIEST_DAY)
    if days > 0 and (LATEST_DAY - day).days < days:
        return format_day(LATEST_DAY)
    return format_day(day + timedelta(days=days))


def days_since_earliest(value: DayLike) -> int:
    return (parse_day(value) - EARLIEST_DAY).days


def days_between(start: DayLike, end: DayLike) -> int:
    return (parse_day(end) - parse_day(start)).days


def shift_month(value: DayLike, months: int) -> Tuple[int, int]:
    day = parse_day(value)
    index = day.year * 12 + (day.month - 1) + months
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[str, str]:
    last = calendar.monthrange(year, month)[1]
    return format_day(date(year, month, 1)), format_day(date(year, month, last))


def week_label(value: DayLike) -> str:
    day = parse_day(value)
    return f"{day.month}/{day.day}"


def month_label(year: int, month: int) -> str:
    return f"{calendar.month_name[month]} {year}"


def month_short_label(month: int) -> str:
    return calendar.month_abbr[month]
