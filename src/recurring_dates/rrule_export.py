#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Translate recurrence specs to iCalendar (RFC 5545) recurrence rules.

The rules describe the dates `RecurrenceEngine` generates under the `Skip`
overflow policy: months without the requested day and non-leap years for a
February 29th anchor produce no occurrence.
"""

import datetime

from dateutil import rrule

from recurring_dates.constants import LAST_WEEK_OF_MONTH
from recurring_dates.engine import effective_end
from recurring_dates.schema import (
    DailySpec,
    DateRange,
    MonthlySpec,
    RecurrenceSpec,
    WeeklySpec,
    YearlySpec,
)
from recurring_dates.time_utils import (
    add_days,
    add_months,
    add_years,
    first_of_month,
    months_between,
    parse_calendar_date,
)

# RFC 5545 weekday codes, Sunday first
ICAL_WEEKDAYS = ("SU", "MO", "TU", "WE", "TH", "FR", "SA")
RRULE_WEEKDAYS = (
    rrule.SU,
    rrule.MO,
    rrule.TU,
    rrule.WE,
    rrule.TH,
    rrule.FR,
    rrule.SA,
)

_freq_map = {
    DailySpec: rrule.DAILY,
    WeeklySpec: rrule.WEEKLY,
    MonthlySpec: rrule.MONTHLY,
    YearlySpec: rrule.YEARLY,
}


def _setpos(week_of_month: int) -> int:
    return -1 if week_of_month == LAST_WEEK_OF_MONTH else week_of_month


def _rule_until(
    spec: RecurrenceSpec, start: datetime.date, end: datetime.date
) -> datetime.date:
    """The last day occurrences may fall on. The engine does not visit the final
    month (or year) of the range if `start` shifted into it lands after `end`, so
    the rule stops before that period."""
    match spec:
        case MonthlySpec():
            steps = months_between(start, end) // spec.interval
            last_visit = add_months(start, steps * spec.interval)
            if last_visit > end:
                return add_days(first_of_month(last_visit), -1)
        case YearlySpec():
            steps = (end.year - start.year) // spec.interval
            last_visit = add_years(start, steps * spec.interval)
            if last_visit > end:
                return add_days(last_visit.replace(month=1, day=1), -1)
    return end


def rrule_string(spec: RecurrenceSpec) -> str:
    """Render `spec` as the value of an iCalendar `RRULE` property.

    Example
    -------
        WeeklySpec(interval=2, days_of_week={1, 3})
        -> "FREQ=WEEKLY;INTERVAL=2;WKST=SU;BYDAY=MO,WE"

    Notes
    -----
    A weekly spec without weekdays has no `BYDAY` part, the rule then repeats on the
    weekday of `DTSTART`, as the engine does.
    """
    parts = [f"FREQ={spec.type.upper()}", f"INTERVAL={spec.interval}"]
    match spec:
        case WeeklySpec():
            parts.append("WKST=SU")
            if spec.days_of_week:
                days = ",".join(ICAL_WEEKDAYS[d] for d in sorted(spec.days_of_week))
                parts.append(f"BYDAY={days}")
        case MonthlySpec() if spec.by_day_of_month:
            parts.append(f"BYMONTHDAY={spec.day_of_month}")
        case MonthlySpec():
            setpos = _setpos(spec.week_of_month)
            parts.append(f"BYDAY={setpos}{ICAL_WEEKDAYS[spec.day_of_week]}")
        case YearlySpec():
            parts.append(f"BYMONTH={spec.month + 1}")
            parts.append(f"BYMONTHDAY={spec.day}")
    return ";".join(parts)


def to_rrule(spec: RecurrenceSpec, date_range: DateRange) -> rrule.rrule:
    """Build a `dateutil` rule repeating `spec` within a valid `date_range`.

    Occurrences are midnight `datetime` objects. The rule is bounded by the range
    only (see `_rule_until`), use `itertools.islice` to apply `MAX_OCCURRENCES`.

    Raises
    ------
    ParseError if the bounds of `date_range` cannot be parsed.
    """
    start = parse_calendar_date(date_range.start)
    end = _rule_until(spec, start, effective_end(date_range))
    rule_params = {
        "freq": _freq_map[type(spec)],
        "interval": spec.interval,
        "dtstart": datetime.datetime.combine(start, datetime.time.min),
        "until": datetime.datetime.combine(end, datetime.time.min),
        "wkst": rrule.SU,
        "byweekday": None,
        "bymonthday": None,
        "bymonth": None,
    }
    match spec:
        case WeeklySpec():
            days = spec.effective_days(start)
            rule_params["byweekday"] = [RRULE_WEEKDAYS[d] for d in days]
        case MonthlySpec() if spec.by_day_of_month:
            rule_params["bymonthday"] = spec.day_of_month
        case MonthlySpec():
            weekday = RRULE_WEEKDAYS[spec.day_of_week]
            rule_params["byweekday"] = weekday(_setpos(spec.week_of_month))
        case YearlySpec():
            rule_params["bymonth"] = spec.month + 1
            rule_params["bymonthday"] = spec.day
    return rrule.rrule(**{k: v for k, v in rule_params.items() if v is not None})
