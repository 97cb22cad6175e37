#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Entry point for expanding recurrence specs into concrete dates.

The engine is stateless: callers own the spec and range (see
`recurring_dates.state.RecurrenceState`) and call the engine again whenever either
changes. Calls do not share any data and may be made concurrently.
"""

import datetime
import logging

from recurring_dates.aliases import GeneratedSequence
from recurring_dates.constants import DEFAULT_RANGE_YEARS
from recurring_dates.generators import (
    daily_dates,
    monthly_dates,
    weekly_dates,
    yearly_dates,
)
from recurring_dates.schema import (
    DailySpec,
    DateRange,
    GenerationResult,
    MonthlySpec,
    RecurrenceSpec,
    ValidationErrorKind,
    WeeklySpec,
    YearlySpec,
)
from recurring_dates.sequence import finalize
from recurring_dates.summary import describe as describe_spec
from recurring_dates.time_utils import OverflowPolicy, add_years, parse_calendar_date
from recurring_dates.validation import is_blank
from recurring_dates.validation import validate_range as validate_date_range

logger = logging.getLogger(__name__)


def effective_end(date_range: DateRange) -> datetime.date:
    """The last date of a validated range, one year after the start if no end is
    given."""
    if not is_blank(date_range.end):
        return parse_calendar_date(date_range.end)
    start = parse_calendar_date(date_range.start)
    try:
        return add_years(start, DEFAULT_RANGE_YEARS)
    except ValueError:
        return datetime.date.max


class RecurrenceEngine:
    """Validates date ranges, generates recurring dates and summarises specs.

    Parameters
    ----------
    overflow_policy
        How candidates that do not exist in their month are resolved, eg the 31st
        of a shorter month or February 29th in a non-leap year.
    """

    def __init__(self, overflow_policy: OverflowPolicy | str = OverflowPolicy.Skip):
        self.overflow_policy = OverflowPolicy(overflow_policy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(overflow_policy={self.overflow_policy!r})"

    def validate_range(self, date_range: DateRange) -> ValidationErrorKind | None:
        return validate_date_range(date_range)

    def describe(self, spec: RecurrenceSpec) -> str:
        return describe_spec(spec)

    def generate(
        self, spec: RecurrenceSpec, date_range: DateRange
    ) -> GeneratedSequence:
        """Expand `spec` within `date_range`.

        Returns
        -------
        Ascending dates without repeats, at most `MAX_OCCURRENCES` of them. An
        empty list is returned if the range is invalid, call `validate_range` to
        find out why.
        """
        return self.run(spec, date_range).sequence

    def run(self, spec: RecurrenceSpec, date_range: DateRange) -> GenerationResult:
        """As `generate`, but also report why a range could not be expanded."""
        error = self.validate_range(date_range)
        if error is not None:
            logger.debug(f"Not generating dates for {date_range}: {error.message}")
            return GenerationResult(sequence=[], error=error)

        start = parse_calendar_date(date_range.start)
        end = effective_end(date_range)
        logger.debug(f"Generating dates from {start} to {end} for {spec!r}")
        match spec:
            case DailySpec():
                candidates = daily_dates(spec, start, end)
            case WeeklySpec():
                candidates = weekly_dates(spec, start, end)
            case MonthlySpec():
                candidates = monthly_dates(spec, start, end, self.overflow_policy)
            case YearlySpec():
                candidates = yearly_dates(spec, start, end, self.overflow_policy)
            case _:
                logger.warning(f"Unknown recurrence type: {type(spec).__name__}")
                candidates = []
        sequence = finalize(candidates)
        logger.debug(f"Generated {len(sequence)} dates")
        return GenerationResult(sequence=sequence)


_default_engine = RecurrenceEngine()


def validate_range(date_range: DateRange) -> ValidationErrorKind | None:
    return _default_engine.validate_range(date_range)


def generate(spec: RecurrenceSpec, date_range: DateRange) -> GeneratedSequence:
    return _default_engine.generate(spec, date_range)


def describe(spec: RecurrenceSpec) -> str:
    return _default_engine.describe(spec)
