#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

import pytest

from recurring_dates.constants import MAX_OCCURRENCES
from recurring_dates.generators import (
    daily_dates,
    monthly_dates,
    weekly_dates,
    yearly_dates,
)
from recurring_dates.schema import DailySpec, MonthlySpec, WeeklySpec, YearlySpec
from recurring_dates.sequence import finalize
from recurring_dates.time_utils import OverflowPolicy


def test_daily_every_third_day():
    dates = daily_dates(
        DailySpec(interval=3), datetime.date(2024, 1, 15), datetime.date(2024, 1, 21)
    )
    assert dates == [
        datetime.date(2024, 1, 15),
        datetime.date(2024, 1, 18),
        datetime.date(2024, 1, 21),
    ]


def test_daily_single_day_range():
    day = datetime.date(2024, 1, 15)
    assert daily_dates(DailySpec(interval=7), day, day) == [day]


def test_daily_stops_at_cap():
    dates = daily_dates(
        DailySpec(), datetime.date(2024, 1, 1), datetime.date(2024, 12, 31)
    )
    assert len(dates) == MAX_OCCURRENCES
    assert dates[-1] == datetime.date(2024, 4, 9)


def test_weekly_multiple_days():
    dates = weekly_dates(
        WeeklySpec(days_of_week={1, 3, 5}),
        datetime.date(2024, 1, 15),
        datetime.date(2024, 2, 1),
    )
    assert finalize(dates) == [
        datetime.date(2024, 1, 15),
        datetime.date(2024, 1, 17),
        datetime.date(2024, 1, 19),
        datetime.date(2024, 1, 22),
        datetime.date(2024, 1, 24),
        datetime.date(2024, 1, 26),
        datetime.date(2024, 1, 29),
        datetime.date(2024, 1, 31),
    ]


def test_weekly_clips_first_week_to_start():
    # Sunday 14th falls before the Wednesday start
    dates = weekly_dates(
        WeeklySpec(days_of_week={0, 3}),
        datetime.date(2024, 1, 17),
        datetime.date(2024, 1, 31),
    )
    assert finalize(dates) == [
        datetime.date(2024, 1, 17),
        datetime.date(2024, 1, 21),
        datetime.date(2024, 1, 24),
        datetime.date(2024, 1, 28),
        datetime.date(2024, 1, 31),
    ]


def test_weekly_defaults_to_start_weekday_and_skips_weeks():
    dates = weekly_dates(
        WeeklySpec(interval=2),
        datetime.date(2024, 1, 17),
        datetime.date(2024, 2, 29),
    )
    assert dates == [
        datetime.date(2024, 1, 17),
        datetime.date(2024, 1, 31),
        datetime.date(2024, 2, 14),
        datetime.date(2024, 2, 28),
    ]


def test_weekly_cap_is_applied_by_finalizer():
    dates = weekly_dates(
        WeeklySpec(days_of_week=set(range(7))),
        datetime.date(2024, 1, 1),
        datetime.date(2024, 12, 31),
    )
    assert len(dates) >= MAX_OCCURRENCES
    final = finalize(dates)
    assert len(final) == MAX_OCCURRENCES
    assert final[-1] == datetime.date(2024, 4, 9)


def test_monthly_last_monday():
    dates = monthly_dates(
        MonthlySpec(week_of_month=5, day_of_week=1),
        datetime.date(2024, 1, 1),
        datetime.date(2024, 3, 31),
    )
    assert dates == [
        datetime.date(2024, 1, 29),
        datetime.date(2024, 2, 26),
        datetime.date(2024, 3, 25),
    ]


def test_monthly_first_friday_across_years():
    dates = monthly_dates(
        MonthlySpec(week_of_month=1, day_of_week=5),
        datetime.date(2024, 11, 1),
        datetime.date(2025, 2, 28),
    )
    assert dates == [
        datetime.date(2024, 11, 1),
        datetime.date(2024, 12, 6),
        datetime.date(2025, 1, 3),
        datetime.date(2025, 2, 7),
    ]


def test_monthly_day_of_month_with_interval_excludes_dates_before_start():
    dates = monthly_dates(
        MonthlySpec(interval=3, week_of_month=0, day_of_month=15),
        datetime.date(2024, 1, 20),
        datetime.date(2024, 12, 31),
    )
    assert dates == [
        datetime.date(2024, 4, 15),
        datetime.date(2024, 7, 15),
        datetime.date(2024, 10, 15),
    ]


def test_monthly_candidate_after_end_day_in_last_month():
    # the range ends mid-month, before that month's candidate
    dates = monthly_dates(
        MonthlySpec(week_of_month=0, day_of_month=20),
        datetime.date(2024, 1, 31),
        datetime.date(2024, 3, 15),
    )
    assert dates == [datetime.date(2024, 2, 20)]


@pytest.mark.parametrize(
    "policy, expected",
    [
        (
            OverflowPolicy.Skip,
            [
                datetime.date(2024, 1, 31),
                datetime.date(2024, 3, 31),
                datetime.date(2024, 5, 31),
            ],
        ),
        (
            OverflowPolicy.Clamp,
            [
                datetime.date(2024, 1, 31),
                datetime.date(2024, 2, 29),
                datetime.date(2024, 3, 31),
                datetime.date(2024, 4, 30),
                datetime.date(2024, 5, 31),
                datetime.date(2024, 6, 30),
            ],
        ),
        (
            OverflowPolicy.RollOver,
            [
                datetime.date(2024, 1, 31),
                datetime.date(2024, 3, 2),
                datetime.date(2024, 3, 31),
                datetime.date(2024, 5, 1),
                datetime.date(2024, 5, 31),
            ],
        ),
    ],
)
def test_monthly_31st(policy: OverflowPolicy, expected: list[datetime.date]):
    dates = monthly_dates(
        MonthlySpec(week_of_month=0, day_of_month=31),
        datetime.date(2024, 1, 1),
        datetime.date(2024, 6, 30),
        policy,
    )
    assert dates == expected


def test_yearly_christmas():
    dates = yearly_dates(
        YearlySpec(month=11, day=25),
        datetime.date(2024, 1, 1),
        datetime.date(2026, 12, 31),
    )
    assert dates == [
        datetime.date(2024, 12, 25),
        datetime.date(2025, 12, 25),
        datetime.date(2026, 12, 25),
    ]


def test_yearly_interval_counts_from_start_year():
    dates = yearly_dates(
        YearlySpec(interval=2, month=6, day=4),
        datetime.date(2024, 8, 1),
        datetime.date(2030, 12, 31),
    )
    # 2024 is the first year in the cycle but its anchor precedes the start
    assert dates == [
        datetime.date(2026, 7, 4),
        datetime.date(2028, 7, 4),
        datetime.date(2030, 7, 4),
    ]


@pytest.mark.parametrize(
    "policy, expected",
    [
        (
            OverflowPolicy.Skip,
            [datetime.date(2024, 2, 29), datetime.date(2028, 2, 29)],
        ),
        (
            OverflowPolicy.Clamp,
            [
                datetime.date(2023, 2, 28),
                datetime.date(2024, 2, 29),
                datetime.date(2025, 2, 28),
                datetime.date(2026, 2, 28),
                datetime.date(2027, 2, 28),
                datetime.date(2028, 2, 29),
            ],
        ),
        (
            OverflowPolicy.RollOver,
            [
                datetime.date(2023, 3, 1),
                datetime.date(2024, 2, 29),
                datetime.date(2025, 3, 1),
                datetime.date(2026, 3, 1),
                datetime.date(2027, 3, 1),
                datetime.date(2028, 2, 29),
            ],
        ),
    ],
)
def test_yearly_leap_day(policy: OverflowPolicy, expected: list[datetime.date]):
    dates = yearly_dates(
        YearlySpec(month=1, day=29),
        datetime.date(2023, 1, 1),
        datetime.date(2028, 12, 31),
        policy,
    )
    assert dates == expected


def test_monthly_skips_last_month_when_start_day_is_past_end():
    # March is not visited, January 20th plus two months is after the end
    dates = monthly_dates(
        MonthlySpec(week_of_month=0, day_of_month=5),
        datetime.date(2024, 1, 20),
        datetime.date(2024, 3, 10),
    )
    assert dates == [datetime.date(2024, 2, 5)]


def test_yearly_skips_last_year_when_start_day_is_past_end():
    dates = yearly_dates(
        YearlySpec(month=0, day=10),
        datetime.date(2024, 6, 1),
        datetime.date(2025, 3, 1),
    )
    assert dates == []


def test_weekly_at_last_representable_dates():
    dates = weekly_dates(
        WeeklySpec(days_of_week=set(range(7))),
        datetime.date(9999, 12, 25),
        datetime.date.max,
    )
    assert finalize(dates) == [datetime.date(9999, 12, d) for d in range(25, 32)]


def test_weekly_at_first_representable_dates():
    # 0001-01-01 is a Monday
    dates = weekly_dates(
        WeeklySpec(days_of_week={0, 1}),
        datetime.date.min,
        datetime.date(1, 1, 14),
    )
    assert finalize(dates) == [
        datetime.date(1, 1, 1),
        datetime.date(1, 1, 7),
        datetime.date(1, 1, 8),
        datetime.date(1, 1, 14),
    ]
