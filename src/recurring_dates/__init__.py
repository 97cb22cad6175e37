#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from importlib.metadata import PackageNotFoundError, version  # pragma: no cover

from omegaconf import OmegaConf

from recurring_dates.engine import (
    RecurrenceEngine,
    describe,
    generate,
    validate_range,
)
from recurring_dates.rrule_export import rrule_string, to_rrule
from recurring_dates.schema import (
    DailySpec,
    DateRange,
    GenerationResult,
    MonthlySpec,
    RecurrenceSpec,
    ValidationErrorKind,
    WeeklySpec,
    YearlySpec,
    parse_recurrence_spec,
)
from recurring_dates.state import RecurrenceState
from recurring_dates.time_utils import OverflowPolicy

try:
    # Change here if project is renamed and does not equal the package name
    dist_name = "recurring-dates"
    __version__ = version(dist_name)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError


def _today() -> str:
    return datetime.date.today().isoformat()


OmegaConf.register_new_resolver("today", _today, replace=True)
