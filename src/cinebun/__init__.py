from __future__ import annotations

from .core import (
    ALLOWED_TIERS,
    COOLING_OFFSET_NS,
    MAX_ACTIVE_SLOTS,
    SYMBOL,
    CapacityExceededError,
    InvalidSlotArgumentError,
    RegistryConfig,
    Slot,
    SlotAlreadyExistsError,
    SlotRegistry,
    SlotRegistryError,
    Tier,
)
from .runtime.server import CineBunServer, run
from .sdk.client import CineBunClient
from .sdk.time_context import now_ns, to_unix_nanos

__all__ = [
    "run",
    "CineBunServer",
    "CineBunClient",
    "SlotRegistry",
    "RegistryConfig",
    "Slot",
    "Tier",
    "SlotRegistryError",
    "SlotAlreadyExistsError",
    "CapacityExceededError",
    "InvalidSlotArgumentError",
    "SYMBOL",
    "MAX_ACTIVE_SLOTS",
    "COOLING_OFFSET_NS",
    "ALLOWED_TIERS",
    "now_ns",
    "to_unix_nanos",
]
