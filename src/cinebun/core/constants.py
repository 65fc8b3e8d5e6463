"""Static configuration for the slot registry.

Notes:
- The hex identifiers are opaque labels. Only `CRUMB_ORACLE_ID` feeds the fingerprint.
- `SLOT_BATCH_LIMIT` is published for callers but no registry operation enforces it.
"""

from __future__ import annotations

SYMBOL = "CNBN"

MAX_ACTIVE_SLOTS = 131_072

# Settlement = registration timestamp + cooling offset.
COOLING_OFFSET_NS = 284_719_384_291

BAKE_WINDOW_NS = 5_400_000_000_000  # 90 minutes
BAKE_WINDOW_MS = BAKE_WINDOW_NS // 1_000_000

CRUMB_ORACLE_ID = "0x9f2c4e7a1b3d5f68c8e2a4b6d8f7e1c3a5b7d9f2"
GUILD_TREASURY_ID = "0x41d7e9b3c5a2f8164e3b9d7c5a1f2e8b6d4c9a73"
ESCROW_VAULT_ID = "0xb8e3a6f1d4c7295e1a3c5e7f9b2d4f6a8c1e3b57"

FINGERPRINT_SALT = 0xC1BEB0B5
FINGERPRINT_ID_CHARS = 12

ALLOWED_TIERS: tuple[int, ...] = (2, 5, 11)

SLOT_BATCH_LIMIT = 64

# Slot timestamps are signed 64-bit nanosecond counts.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
