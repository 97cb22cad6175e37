#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

from recurring_dates.aliases import DateInput
from recurring_dates.exceptions import ParseError
from recurring_dates.schema import DateRange, ValidationErrorKind
from recurring_dates.time_utils import parse_calendar_date


def is_blank(value: DateInput) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _try_parse(value: DateInput) -> datetime.date | None:
    try:
        return parse_calendar_date(value)
    except ParseError:
        return None


def validate_range(date_range: DateRange) -> ValidationErrorKind | None:
    """Check that `date_range` can be expanded.

    Returns
    -------
    The first problem found, or `None` if the range is valid. The checks, in order,
    are: the start date is given, the start date parses, the end date (if given)
    parses and the end date is not before the start date.
    """
    if is_blank(date_range.start):
        return ValidationErrorKind.MissingStart
    start = _try_parse(date_range.start)
    if start is None:
        return ValidationErrorKind.InvalidStart
    if is_blank(date_range.end):
        return None
    end = _try_parse(date_range.end)
    if end is None:
        return ValidationErrorKind.InvalidEnd
    if end < start:
        return ValidationErrorKind.EndBeforeStart
    return None
