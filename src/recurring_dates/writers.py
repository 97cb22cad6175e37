#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
import json
from pathlib import Path
from typing import Any


def _default(obj: Any) -> str:
    if isinstance(obj, datetime.date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def save_json(data: Any, path: str | Path, indent: int = 4):
    """Save `data` as JSON, writing dates in ISO-8601 format."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=_default)
