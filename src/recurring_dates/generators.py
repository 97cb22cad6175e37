#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Expand each kind of recurrence spec into candidate dates within `[start, end]`.

Every generator stops once `MAX_OCCURRENCES` dates were emitted. The output is not
guaranteed to be sorted or free of repeated days, pass it through
`recurring_dates.sequence.finalize`.
"""

import datetime

from recurring_dates.constants import DAYS_IN_WEEK, MAX_OCCURRENCES
from recurring_dates.schema import DailySpec, MonthlySpec, WeeklySpec, YearlySpec
from recurring_dates.time_utils import (
    OverflowPolicy,
    add_days,
    add_months,
    add_years,
    calendar_date,
    months_between,
    nth_weekday_of_month,
    weekday_index,
)


def daily_dates(
    spec: DailySpec, start: datetime.date, end: datetime.date
) -> list[datetime.date]:
    steps = (end - start).days // spec.interval + 1
    return [
        add_days(start, step * spec.interval)
        for step in range(min(steps, MAX_OCCURRENCES))
    ]


def weekly_dates(
    spec: WeeklySpec, start: datetime.date, end: datetime.date
) -> list[datetime.date]:
    """Walk the range one block of `spec.interval` weeks at a time, starting with
    the week (Sunday to Saturday) containing `start`, and emit the selected
    weekdays of the first week of each block.

    Candidates are placed by their offset from `start` so that weeks reaching
    past `datetime.date.min` or `datetime.date.max` are never materialised.
    """
    days = spec.effective_days(start)
    # days between the Sunday of the first week and `start`
    lead = weekday_index(start)
    span = (end - start).days
    week_stride = spec.interval * DAYS_IN_WEEK
    dates = []
    for step in range((span + lead) // week_stride + 1):
        if len(dates) >= MAX_OCCURRENCES:
            break
        for day_of_week in days:
            offset = step * week_stride + day_of_week - lead
            if 0 <= offset <= span:
                dates.append(add_days(start, offset))
    return dates


def monthly_dates(
    spec: MonthlySpec,
    start: datetime.date,
    end: datetime.date,
    policy: OverflowPolicy = OverflowPolicy.Skip,
) -> list[datetime.date]:
    """Emit one date every `spec.interval` months, counting from the month of `start`.

    The month `spec.interval * n` after `start` is visited while `start` shifted
    by that many months is not after `end`, so the last month of the range is
    skipped when `end` falls before the day of month of `start`.

    Parameters
    ----------
    policy
        How to resolve days past the end of a shorter month in day-of-month mode.
    """
    dates = []
    for step in range(months_between(start, end) // spec.interval + 1):
        if len(dates) >= MAX_OCCURRENCES:
            break
        current = add_months(start, step * spec.interval)
        if current > end:
            break
        if spec.by_day_of_month:
            candidate = calendar_date(
                current.year, current.month, spec.day_of_month, policy
            )
        else:
            candidate = nth_weekday_of_month(
                current.year,
                current.month,
                spec.week_of_month,
                spec.day_of_week,
            )
        if candidate is not None and start <= candidate <= end:
            dates.append(candidate)
    return dates


def yearly_dates(
    spec: YearlySpec,
    start: datetime.date,
    end: datetime.date,
    policy: OverflowPolicy = OverflowPolicy.Skip,
) -> list[datetime.date]:
    """Emit `spec.day` of `spec.month` every `spec.interval` years, counting from the
    year of `start`. A year is visited while `start` shifted into it is not after
    `end`. `policy` decides what happens to February 29th in non-leap years."""
    dates = []
    for step in range((end.year - start.year) // spec.interval + 1):
        if len(dates) >= MAX_OCCURRENCES:
            break
        current = add_years(start, step * spec.interval)
        if current > end:
            break
        candidate = calendar_date(current.year, spec.month + 1, spec.day, policy)
        if candidate is not None and start <= candidate <= end:
            dates.append(candidate)
    return dates
