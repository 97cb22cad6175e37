#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""The state a recurrence picker keeps between user edits.

`RecurrenceState` is immutable: every edit returns a new state which the caller
stores and passes back to the engine via `refreshed`. The settings hold the values
of all four recurrence types at once so switching type does not lose edits, and
`to_spec` picks the ones relevant to the selected type.
"""

import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from recurring_dates.aliases import WeekdayIndex
from recurring_dates.engine import RecurrenceEngine
from recurring_dates.schema import (
    DailySpec,
    DateRange,
    MonthlySpec,
    RecurrenceSpec,
    RecurrenceType,
    WeeklySpec,
    YearlySpec,
)
from recurring_dates.validation import is_blank

NO_PATTERN_SUMMARY = "No pattern configured"
INVALID_SETTINGS_MESSAGE = "Invalid recurrence settings"


class RecurrenceSettings(BaseModel):
    """Per-type recurrence settings as edited in the UI. Values are only checked
    when a spec is built from them."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    every_x_days: int = 1
    every_x_weeks: int = 1
    days_of_week: tuple[WeekdayIndex, ...] = ()
    every_x_months: int = 1
    day_of_month: int = 1
    # 1-5 (first, second, third, fourth, last), 0 selects `day_of_month`
    week_of_month: int = 1
    day_of_week: WeekdayIndex = 0
    every_x_years: int = 1
    month: int = 0
    day: int = 1

    def updated(self, **changes: Any) -> Self:
        """Merge `changes` into a copy of the settings. Keys may be field names or
        their camelCase aliases (eg `everyXDays`)."""
        names = {
            field.alias or name: name
            for name, field in type(self).model_fields.items()
        }
        merged = self.model_dump()
        merged.update({names.get(key, key): value for key, value in changes.items()})
        return self.model_validate(merged)


class RecurrenceState(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: str = ""
    end_date: str = ""
    recurrence_type: RecurrenceType = RecurrenceType.DAILY
    settings: RecurrenceSettings = RecurrenceSettings()
    validation_error: str = ""
    generated_dates: tuple[datetime.date, ...] = ()

    def with_start_date(self, start_date: str) -> Self:
        return self.model_copy(update={"start_date": start_date})

    def with_end_date(self, end_date: str) -> Self:
        return self.model_copy(update={"end_date": end_date})

    def with_recurrence_type(self, recurrence_type: RecurrenceType | str) -> Self:
        return self.model_copy(
            update={"recurrence_type": RecurrenceType(recurrence_type)}
        )

    def with_settings(self, **changes: Any) -> Self:
        return self.model_copy(update={"settings": self.settings.updated(**changes)})

    def with_day_of_month(self, day_of_month: int) -> Self:
        """Repeat monthly on a fixed day, leaving nth-weekday mode."""
        return self.with_settings(week_of_month=0, day_of_month=day_of_month)

    def with_nth_weekday(self, week_of_month: int, day_of_week: WeekdayIndex) -> Self:
        """Repeat monthly on the nth (or last, for 5) weekday, leaving day-of-month
        mode."""
        if week_of_month == 0:
            raise ValueError("week_of_month must be in 1-5 for nth-weekday mode")
        return self.with_settings(week_of_month=week_of_month, day_of_week=day_of_week)

    def cleared(self) -> Self:
        return type(self)()

    def to_spec(self) -> RecurrenceSpec:
        """Build the spec for the selected recurrence type.

        Raises
        ------
        pydantic.ValidationError if the relevant settings are out of range.
        """
        spec_type, fields = self._spec_fields()
        return spec_type(**fields)

    def _spec_fields(self) -> tuple[type[BaseModel], dict[str, Any]]:
        settings = self.settings
        match self.recurrence_type:
            case RecurrenceType.DAILY:
                return DailySpec, {"interval": settings.every_x_days}
            case RecurrenceType.WEEKLY:
                return WeeklySpec, {
                    "interval": settings.every_x_weeks,
                    "days_of_week": settings.days_of_week,
                }
            case RecurrenceType.MONTHLY:
                return MonthlySpec, {
                    "interval": settings.every_x_months,
                    "week_of_month": settings.week_of_month,
                    "day_of_month": settings.day_of_month,
                    "day_of_week": settings.day_of_week,
                }
            case RecurrenceType.YEARLY:
                return YearlySpec, {
                    "interval": settings.every_x_years,
                    "month": settings.month,
                    "day": settings.day,
                }
        raise ValueError(f"Unsupported recurrence type: {self.recurrence_type}")

    def to_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date or None)

    def refreshed(self, engine: RecurrenceEngine | None = None) -> Self:
        """Validate the range and regenerate the dates, storing both outcomes.

        Out of range settings do not raise: no dates are generated and the range
        error, or `INVALID_SETTINGS_MESSAGE` if the range is valid, is stored.
        """
        engine = engine or RecurrenceEngine()
        try:
            spec = self.to_spec()
        except ValidationError:
            error = engine.validate_range(self.to_range())
            message = INVALID_SETTINGS_MESSAGE if error is None else error.message
            return self.model_copy(
                update={"validation_error": message, "generated_dates": ()}
            )
        result = engine.run(spec, self.to_range())
        return self.model_copy(
            update={
                "validation_error": result.message,
                "generated_dates": tuple(result.sequence),
            }
        )

    def summary(self, engine: RecurrenceEngine | None = None) -> str:
        """Describe the selected pattern. Out of range settings are described with
        the fallbacks of `recurring_dates.summary.describe`."""
        if is_blank(self.start_date):
            return NO_PATTERN_SUMMARY
        engine = engine or RecurrenceEngine()
        try:
            spec = self.to_spec()
        except ValidationError:
            spec_type, fields = self._spec_fields()
            spec = spec_type.model_construct(**fields)
        return engine.describe(spec)
