#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A light wrapper around the `datetime` library, containing the calendar arithmetic
the recurrence generators are built from. All helpers work on calendar dates only,
there is no notion of time of day or timezone.

Notes
-----
    1. Weekdays are indexed from Sunday (0) to Saturday (6), unlike
    `datetime.date.weekday` which starts on Monday. Use `weekday_index` rather
    than `date.weekday()`.
    2. Months passed to these helpers are 1-indexed, as in `datetime`.
"""

import calendar
import datetime
from enum import StrEnum

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from recurring_dates.aliases import DateInput, WeekdayIndex, WeekOfMonth
from recurring_dates.constants import DAYS_IN_WEEK, LAST_WEEK_OF_MONTH
from recurring_dates.exceptions import ParseError


class OverflowPolicy(StrEnum):
    """How to resolve a candidate date that does not exist in its target month
    (eg the 31st of a 30-day month or February 29th in a non-leap year)."""

    # drop the candidate for that month/year
    Skip = "skip"
    # use the last day of the month instead
    Clamp = "clamp"
    # let the excess days run into the following month
    RollOver = "roll_over"


def weekday_index(d: datetime.date) -> WeekdayIndex:
    """Return an integer in the range [0, 6] for the weekday of `d`, Sunday is 0."""
    return (d.weekday() + 1) % DAYS_IN_WEEK


def add_days(d: datetime.date, days: int) -> datetime.date:
    return d + datetime.timedelta(days=days)


def add_months(d: datetime.date, months: int) -> datetime.date:
    """Offset `d` by `months`. The day is clamped to the length of the target month."""
    return d + relativedelta(months=months)


def add_years(d: datetime.date, years: int) -> datetime.date:
    """Offset `d` by `years`. February 29th maps to February 28th in non-leap years."""
    return d + relativedelta(years=years)


def start_of_week(d: datetime.date) -> datetime.date:
    """Return the Sunday on or before `d`, or `datetime.date.min` if that Sunday
    precedes the first representable date."""
    days_back = min(weekday_index(d), (d - datetime.date.min).days)
    return d - datetime.timedelta(days=days_back)


def first_of_month(d: datetime.date) -> datetime.date:
    return d.replace(day=1)


def months_between(start: datetime.date, end: datetime.date) -> int:
    """Count month boundaries crossed from `start` to `end`, ignoring the day."""
    return (end.year - start.year) * 12 + end.month - start.month


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def last_of_month(year: int, month: int) -> datetime.date:
    return datetime.date(year, month, days_in_month(year, month))


def calendar_date(
    year: int,
    month: int,
    day: int,
    policy: OverflowPolicy = OverflowPolicy.Skip,
) -> datetime.date | None:
    """Create the date `day` of `month` in `year`, resolving days past the end of
    the month according to `policy`.

    Returns
    -------
    The resolved date, or `None` if the day does not exist and `policy` is `Skip`.
    """
    month_length = days_in_month(year, month)
    if day <= month_length:
        return datetime.date(year, month, day)
    if policy == OverflowPolicy.Skip:
        return None
    if policy == OverflowPolicy.Clamp:
        return datetime.date(year, month, month_length)
    if policy == OverflowPolicy.RollOver:
        return datetime.date(year, month, 1) + datetime.timedelta(days=day - 1)
    raise ValueError(f"Unsupported overflow policy: {policy}")


def nth_weekday_of_month(
    year: int, month: int, week_of_month: WeekOfMonth, day_of_week: WeekdayIndex
) -> datetime.date:
    """Return the `week_of_month`-th `day_of_week` of a month.

    Parameters
    ----------
    week_of_month
        1 to 4 for the first to fourth occurrence, 5 for the last occurrence.
    day_of_week
        Sunday-based weekday index.

    Notes
    -----
    For `week_of_month` in 1-4 the result is not corrected if it falls past the end
    of the month. Every month has at least 28 days, hence four occurrences of each
    weekday, so this cannot happen for valid inputs.
    """
    if week_of_month == LAST_WEEK_OF_MONTH:
        last_day = last_of_month(year, month)
        days_from_last = (weekday_index(last_day) - day_of_week + 7) % 7
        return last_day - datetime.timedelta(days=days_from_last)
    first_day = datetime.date(year, month, 1)
    days_from_first = (day_of_week - weekday_index(first_day) + 7) % 7
    return first_day + datetime.timedelta(
        days=days_from_first + (week_of_month - 1) * DAYS_IN_WEEK
    )


def ordinal_suffix(n: int) -> str:
    """Return the English ordinal suffix for `n` (eg "st" for 1, "th" for 12)."""
    if 11 <= n <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def parse_calendar_date(value: DateInput) -> datetime.date:
    """Resolve a user supplied date to a calendar date.

    Parameters
    ----------
    value
        A `datetime.date`, a `datetime.datetime` (only the date is kept) or an
        ISO-8601 string such as "2024-01-15" or "2024-01-15T09:30:00".

    Raises
    ------
    ParseError if `value` is empty or does not represent a calendar date.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"Cannot parse {value!r} as a calendar date")
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Cannot parse {value!r} as a calendar date") from e
