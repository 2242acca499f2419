import pytest

from habit_analytics.analytics.periods import monthly_patterns, weekly_patterns
from habit_analytics.analytics.utils.dates import InvalidDateError
from conftest import make_entries


def test_weekly_completion_rate_rounds():
    entries = make_entries("h1", ["2024-01-08", "2024-01-09", "2024-01-10", "2024-01-11", "2024-01-12"], missed=["2024-01-13"])
    [week] = weekly_patterns(entries, "h1", 1, "2024-01-14")
    assert week.periodStart == "2024-01-08"
    assert week.periodEnd == "2024-01-14"
    assert week.completedDays == 5
    assert week.totalDays == 7
    assert week.completionRate == 71


def test_weekly_windows_are_oldest_first():
    entries = make_entries("h1", ["2024-01-01", "2024-01-07", "2024-01-08"]) + make_entries("h2", ["2024-01-02"])
    weeks = weekly_patterns(entries, "h1", 3, "2024-01-14")
    assert [(week.periodStart, week.periodEnd) for week in weeks] == [
        ("2023-12-25", "2023-12-31"),
        ("2024-01-01", "2024-01-07"),
        ("2024-01-08", "2024-01-14"),
    ]
    assert [week.completedDays for week in weeks] == [0, 2, 1]
    assert [week.label for week in weeks] == ["12/25", "1/1", "1/8"]


def test_weekly_denominator_ignores_habit_age():
    [week] = weekly_patterns(make_entries("h1", ["2024-01-14"]), "h1", 1, "2024-01-14")
    assert week.totalDays == 7
    assert week.completionRate == 14


def test_zero_periods_requested():
    entries = make_entries("h1", ["2024-01-14"])
    assert weekly_patterns(entries, "h1", 0, "2024-01-14") == []
    assert monthly_patterns(entries, "h1", 0, "2024-01-14") == []


def test_monthly_uses_calendar_month_lengths():
    entries = make_entries("h1", ["2023-12-31", "2024-02-01", "2024-02-29", "2024-03-01"], missed=["2024-03-02"])
    months = monthly_patterns(entries, "h1", 3, "2024-03-15")
    assert [(month.periodStart, month.periodEnd, month.totalDays) for month in months] == [
        ("2024-01-01", "2024-01-31", 31),
        ("2024-02-01", "2024-02-29", 29),
        ("2024-03-01", "2024-03-31", 31),
    ]
    assert [month.completedDays for month in months] == [0, 2, 1]
    assert [month.completionRate for month in months] == [0, 7, 3]
    assert months[1].label == "February 2024"


def test_monthly_crosses_year_boundary():
    months = monthly_patterns(make_entries("h1", ["2023-12-31"]), "h1", 2, "2024-01-10")
    assert [month.label for month in months] == ["December 2023", "January 2024"]
    assert months[0].completedDays == 1
    assert months[0].totalDays == 31


def test_periods_reject_malformed_reference():
    with pytest.raises(InvalidDateError):
        weekly_patterns([], "h1", 2, "2024-02-30")
    with pytest.raises(InvalidDateError):
        monthly_patterns([], "h1", 2, "March 2024")


def test_weekly_periods_list_their_entries():
    entries = make_entries("h1", ["2024-01-08", "2024-01-14"], missed=["2024-01-10"]) + make_entries("h1", ["2024-01-01"])
    [week] = weekly_patterns(entries, "h1", 1, "2024-01-14")
    assert [entry.model_dump() for entry in week.entries] == [
        {"date": "2024-01-08", "completed": True, "currentValue": 1},
        {"date": "2024-01-10", "completed": False, "currentValue": 0},
        {"date": "2024-01-14", "completed": True, "currentValue": 1},
    ]


def test_monthly_short_label():
    months = monthly_patterns([], "h1", 2, "2024-01-10")
    assert [month.shortLabel for month in months] == ["Dec", "Jan"]


def test_periods_stop_at_first_calendar_day():
    entries = make_entries("h1", ["0001-01-01", "0001-01-05"])
    weeks = weekly_patterns(entries, "h1", 4, "0001-01-10")
    assert [(week.periodStart, week.periodEnd) for week in weeks] == [
        ("0001-01-01", "0001-01-03"),
        ("0001-01-04", "0001-01-10"),
    ]
    assert [week.completedDays for week in weeks] == [1, 1]
    assert weeks[0].totalDays == 7

    months = monthly_patterns(entries, "h1", 6, "0001-02-15")
    assert [month.periodStart for month in months] == ["0001-01-01", "0001-02-01"]
    assert months[0].completedDays == 2
