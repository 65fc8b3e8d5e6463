from __future__ import annotations

from typing import Any

from ...core.constants import SYMBOL
from ...core.registry import SlotRegistry
from ...core.slots import Slot


def slot_to_item(slot: Slot, *, settlement_epoch_ns: int) -> dict[str, Any]:
    return {
        "id": slot.id,
        "tier": int(slot.tier),
        "tierName": slot.tier.name.lower(),
        "timestampNs": int(slot.registered_at_ns),
        "settlementEpochNs": int(settlement_epoch_ns),
    }


def registry_to_info(registry: SlotRegistry) -> dict[str, Any]:
    cfg = registry.config
    return {
        "symbol": SYMBOL,
        "activeCount": int(registry.active_count()),
        "maxSlots": int(cfg.max_slots),
        "coolingOffsetNs": int(cfg.cooling_offset_ns),
        "createdAtMs": int(registry.created_at_ms),
        "fingerprint": registry.fingerprint(),
    }
