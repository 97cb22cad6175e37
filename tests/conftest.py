#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import pytest

from recurring_dates.engine import RecurrenceEngine
from recurring_dates.time_utils import OverflowPolicy


@pytest.fixture
def engine() -> RecurrenceEngine:
    return RecurrenceEngine()


@pytest.fixture
def clamp_engine() -> RecurrenceEngine:
    return RecurrenceEngine(overflow_policy=OverflowPolicy.Clamp)


@pytest.fixture
def roll_over_engine() -> RecurrenceEngine:
    return RecurrenceEngine(overflow_policy=OverflowPolicy.RollOver)
