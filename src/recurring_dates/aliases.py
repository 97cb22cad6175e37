#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

# an integer in [0, 6] naming a day of the week, Sunday is 0
WeekdayIndex = int
# an integer in [0, 11] naming a month of the year, January is 0
MonthIndex = int
# 0 selects day-of-month mode, 1-4 the nth weekday and 5 the last weekday
WeekOfMonth = int
# a raw date as entered by the user, typically an ISO-8601 string
DateInput = datetime.date | str | None
# the output of a generation call: ascending, unique, capped dates
GeneratedSequence = list[datetime.date]
