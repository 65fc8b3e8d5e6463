from __future__ import annotations

import time
from datetime import datetime

import numpy as np

NANOS_PER_SECOND = 1_000_000_000


def to_unix_nanos(timestamp: int | float | datetime | None) -> int | None:
    """Normalize a timestamp to integer nanoseconds since the Unix epoch.

    - `int` values are taken as nanoseconds already.
    - `float` values are taken as seconds (the `time.time()` convention).
    - `datetime` values go through `datetime.timestamp()`; naive ones are local time.
    """

    if timestamp is None:
        return None
    if isinstance(timestamp, bool):
        raise ValueError("timestamp must be a number or datetime, not bool")
    if isinstance(timestamp, datetime):
        whole = int(timestamp.replace(microsecond=0).timestamp())
        return whole * NANOS_PER_SECOND + timestamp.microsecond * 1_000
    if isinstance(timestamp, (int, np.integer)):
        return int(timestamp)
    value = float(timestamp)
    if not np.isfinite(value):
        raise ValueError("timestamp must be finite")
    return int(round(value * NANOS_PER_SECOND))


def now_ns() -> int:
    return time.time_ns()
