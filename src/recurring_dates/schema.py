#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Structured types describing a recurrence pattern and the window it is expanded in."""

import datetime
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Annotated, Any, Literal, NamedTuple, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    model_validator,
)
from pydantic.alias_generators import to_camel

from recurring_dates.aliases import DateInput, WeekdayIndex
from recurring_dates.constants import (
    LAST_WEEK_OF_MONTH,
    MAX_DAILY_INTERVAL,
    MAX_DAYS_IN_MONTH,
    MAX_MONTHLY_INTERVAL,
    MAX_WEEKLY_INTERVAL,
    MAX_YEARLY_INTERVAL,
    MONTH_NAMES,
)
from recurring_dates.time_utils import weekday_index


class RecurrenceType(StrEnum):
    DAILY = auto()
    WEEKLY = auto()
    MONTHLY = auto()
    YEARLY = auto()


Weekday = Annotated[int, Field(ge=0, le=6)]


class _SpecBase(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class DailySpec(_SpecBase):
    """Repeat every `interval` days."""

    type: Literal["daily"] = "daily"
    interval: int = Field(1, ge=1, le=MAX_DAILY_INTERVAL)


class WeeklySpec(_SpecBase):
    """Repeat on the selected weekdays every `interval` weeks.

    Parameters
    ----------
    days_of_week
        Sunday-based weekday indices. When empty, the weekday of the first
        date in the range is used.
    """

    type: Literal["weekly"] = "weekly"
    interval: int = Field(1, ge=1, le=MAX_WEEKLY_INTERVAL)
    days_of_week: frozenset[Weekday] = frozenset()

    def effective_days(self, start: datetime.date) -> list[WeekdayIndex]:
        """The selected weekdays in ascending order, or the weekday of `start`
        if none are selected."""
        if not self.days_of_week:
            return [weekday_index(start)]
        return sorted(self.days_of_week)


class MonthlySpec(_SpecBase):
    """Repeat once every `interval` months.

    Parameters
    ----------
    week_of_month
        0 repeats on `day_of_month`. 1 to 4 repeat on the first to fourth
        `day_of_week` of the month and 5 on the last `day_of_week`.
    day_of_month
        Used only when `week_of_month` is 0.
    day_of_week
        Sunday-based weekday index, used only when `week_of_month` is not 0.
    """

    type: Literal["monthly"] = "monthly"
    interval: int = Field(1, ge=1, le=MAX_MONTHLY_INTERVAL)
    week_of_month: int = Field(1, ge=0, le=LAST_WEEK_OF_MONTH)
    day_of_month: int = Field(1, ge=1, le=31)
    day_of_week: Weekday = 0

    @property
    def by_day_of_month(self) -> bool:
        return self.week_of_month == 0

    def with_day_of_month(self, day_of_month: int) -> Self:
        """Switch to day-of-month mode."""
        return self.model_validate(
            {
                **self.model_dump(),
                "week_of_month": 0,
                "day_of_month": day_of_month,
            }
        )

    def with_nth_weekday(self, week_of_month: int, day_of_week: WeekdayIndex) -> Self:
        """Switch to nth-weekday mode."""
        if week_of_month == 0:
            raise ValueError("week_of_month must be in 1-5 for nth-weekday mode")
        return self.model_validate(
            {
                **self.model_dump(),
                "week_of_month": week_of_month,
                "day_of_week": day_of_week,
            }
        )


class YearlySpec(_SpecBase):
    """Repeat on `day` of `month` every `interval` years.

    Parameters
    ----------
    month
        0 for January, 11 for December.
    day
        Day of the month. February 29th is a valid anchor.
    """

    type: Literal["yearly"] = "yearly"
    interval: int = Field(1, ge=1, le=MAX_YEARLY_INTERVAL)
    month: int = Field(0, ge=0, le=11)
    day: int = Field(1, ge=1, le=31)

    @model_validator(mode="after")
    def validate_day_in_month(self) -> Self:
        if self.day > MAX_DAYS_IN_MONTH[self.month]:
            raise ValueError(f"{MONTH_NAMES[self.month]} has no day {self.day}")
        return self


RecurrenceSpec = Annotated[
    DailySpec | WeeklySpec | MonthlySpec | YearlySpec,
    Field(discriminator="type"),
]

_recurrence_spec_adapter = TypeAdapter(RecurrenceSpec)


def parse_recurrence_spec(data: Mapping[str, Any]) -> RecurrenceSpec:
    """Build the recurrence spec variant selected by the `type` key of `data`.

    Raises
    ------
    pydantic.ValidationError if `type` is unknown or a field is out of range.
    """
    return _recurrence_spec_adapter.validate_python(dict(data))


class ValidationErrorKind(StrEnum):
    MissingStart = "missing_start"
    InvalidStart = "invalid_start"
    InvalidEnd = "invalid_end"
    EndBeforeStart = "end_before_start"

    @property
    def message(self) -> str:
        """The message shown to the user."""
        return VALIDATION_MESSAGES[self]


VALIDATION_MESSAGES = {
    ValidationErrorKind.MissingStart: "Start date is required",
    ValidationErrorKind.InvalidStart: "Invalid start date",
    ValidationErrorKind.InvalidEnd: "Invalid end date",
    ValidationErrorKind.EndBeforeStart: "End date must be after start date",
}


class DateRange(NamedTuple):
    """The window in which a recurrence is expanded.

    Parameters
    ----------
    start
        The first date dates may be generated on. Required for generation.
    end
        The last date dates may be generated on. When absent, a window of one year
        from `start` is used.
    """

    start: DateInput = None
    end: DateInput = None


class GenerationResult(NamedTuple):
    """The outcome of expanding a recurrence spec within a date range."""

    sequence: list[datetime.date]
    error: ValidationErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return "" if self.error is None else self.error.message
