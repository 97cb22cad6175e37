#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Human-readable descriptions of recurrence specs. Presentation code should call
`describe` rather than format specs itself."""

from recurring_dates.aliases import MonthIndex, WeekdayIndex
from recurring_dates.constants import (
    MONTH_NAMES,
    WEEK_OF_MONTH_LABELS,
    WEEKDAY_NAMES,
)
from recurring_dates.schema import (
    DailySpec,
    MonthlySpec,
    RecurrenceSpec,
    WeeklySpec,
    YearlySpec,
)
from recurring_dates.time_utils import ordinal_suffix


def _weekday_name(day_of_week: WeekdayIndex | None) -> str:
    if day_of_week is None or not 0 <= day_of_week < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[0]
    return WEEKDAY_NAMES[day_of_week]


def _month_name(month: MonthIndex | None) -> str:
    if month is None or not 0 <= month < len(MONTH_NAMES):
        return MONTH_NAMES[0]
    return MONTH_NAMES[month]


def _describe_daily(spec: DailySpec) -> str:
    interval = spec.interval or 1
    return "Every day" if interval == 1 else f"Every {interval} days"


def _describe_weekly(spec: WeeklySpec) -> str:
    interval = spec.interval or 1
    summary = "Every week" if interval == 1 else f"Every {interval} weeks"
    days = sorted(d for d in (spec.days_of_week or ()) if 0 <= d < len(WEEKDAY_NAMES))
    if days:
        summary += " on " + ", ".join(WEEKDAY_NAMES[d] for d in days)
    return summary


def _describe_monthly(spec: MonthlySpec) -> str:
    interval = spec.interval or 1
    if spec.week_of_month == 0:
        return f"Day {spec.day_of_month or 1} of every {interval} month"
    week = WEEK_OF_MONTH_LABELS.get(spec.week_of_month, "First")
    return f"{week} {_weekday_name(spec.day_of_week)} of every {interval} month"


def _describe_yearly(spec: YearlySpec) -> str:
    interval = spec.interval or 1
    day = spec.day or 1
    unit = "year" if interval == 1 else "years"
    anchor = f"{_month_name(spec.month)} {day}{ordinal_suffix(day)}"
    return f"{anchor} every {interval} {unit}"


def describe(spec: RecurrenceSpec) -> str:
    """Summarise `spec` in a short English sentence.

    Examples
    --------
        "Every 3 days"
        "Every 2 weeks on Monday, Wednesday"
        "Day 15 of every 1 month"
        "Second Tuesday of every 1 month"
        "December 25th every 1 year"

    Notes
    -----
    1. Only `spec` is used, the summary does not depend on any date range.
    2. Missing or out of range fields fall back to an interval of 1, day 1, Sunday,
    "First" and January so that partially configured specs still render.
    """
    match spec:
        case DailySpec():
            return _describe_daily(spec)
        case WeeklySpec():
            return _describe_weekly(spec)
        case MonthlySpec():
            return _describe_monthly(spec)
        case YearlySpec():
            return _describe_yearly(spec)
        case _:
            raise TypeError(f"Cannot describe {type(spec).__name__}")
