from __future__ import annotations

from .client import CineBunClient
from .time_context import now_ns, to_unix_nanos

__all__ = [
    "CineBunClient",
    "now_ns",
    "to_unix_nanos",
]
