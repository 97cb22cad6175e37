#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from collections.abc import Iterable

from recurring_dates.aliases import GeneratedSequence
from recurring_dates.constants import MAX_OCCURRENCES


def finalize(
    candidates: Iterable[datetime.date], limit: int = MAX_OCCURRENCES
) -> GeneratedSequence:
    """Remove repeated days from `candidates`, sort them and keep the first `limit`."""
    return sorted(set(candidates))[:limit]
