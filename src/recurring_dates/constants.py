#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
PACKAGE_NAME = "recurring_dates"
CONFIGS_ROOT = f"{PACKAGE_NAME}.configs"
MAX_OCCURRENCES = 100
"""Hard cap on the length of any generated sequence."""
DEFAULT_RANGE_YEARS = 1
"""Length of the generation window when a range has no end date."""
MAX_DAILY_INTERVAL = 365
MAX_WEEKLY_INTERVAL = 52
MAX_MONTHLY_INTERVAL = 12
MAX_YEARLY_INTERVAL = 10
DAYS_IN_WEEK = 7
LAST_WEEK_OF_MONTH = 5
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEK_OF_MONTH_LABELS = {1: "First", 2: "Second", 3: "Third", 4: "Fourth", 5: "Last"}
# longest length of each month, February counted in a leap year
MAX_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
