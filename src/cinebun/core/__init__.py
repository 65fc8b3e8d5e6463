from __future__ import annotations

from .config import RegistryConfig
from .constants import (
    ALLOWED_TIERS,
    BAKE_WINDOW_MS,
    BAKE_WINDOW_NS,
    COOLING_OFFSET_NS,
    CRUMB_ORACLE_ID,
    ESCROW_VAULT_ID,
    FINGERPRINT_SALT,
    GUILD_TREASURY_ID,
    MAX_ACTIVE_SLOTS,
    SLOT_BATCH_LIMIT,
    SYMBOL,
)
from .errors import (
    CapacityExceededError,
    InvalidSlotArgumentError,
    SlotAlreadyExistsError,
    SlotRegistryError,
)
from .fingerprint import format_fingerprint
from .registry import SlotRegistry
from .slots import Slot, Tier

__all__ = [
    "SYMBOL",
    "MAX_ACTIVE_SLOTS",
    "COOLING_OFFSET_NS",
    "BAKE_WINDOW_NS",
    "BAKE_WINDOW_MS",
    "CRUMB_ORACLE_ID",
    "GUILD_TREASURY_ID",
    "ESCROW_VAULT_ID",
    "FINGERPRINT_SALT",
    "ALLOWED_TIERS",
    "SLOT_BATCH_LIMIT",
    "RegistryConfig",
    "SlotRegistryError",
    "SlotAlreadyExistsError",
    "CapacityExceededError",
    "InvalidSlotArgumentError",
    "format_fingerprint",
    "SlotRegistry",
    "Slot",
    "Tier",
]
