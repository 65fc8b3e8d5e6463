from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

import numpy as np

from ..config import RegistryConfig
from ..constants import INT64_MAX, INT64_MIN
from ..errors import CapacityExceededError, InvalidSlotArgumentError, SlotAlreadyExistsError
from ..fingerprint import format_fingerprint
from ..slots import Slot, Tier

logger = logging.getLogger(__name__)


class SlotRegistry:
    """In-memory slot registry.

    Notes:
    - Slots are never mutated or removed, so `active_count()` only grows.
    - `register` holds the lock across its checks and inserts; concurrent
      callers can never push the registry past `config.max_slots`.
    - The clock is read once, at construction, to stamp `created_at_ms`.
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        *,
        clock_ns: Callable[[], int] = time.time_ns,
    ) -> None:
        self._config = (config or RegistryConfig()).validate()
        self._lock = threading.RLock()
        self._slots: dict[str, Slot] = {}
        self._settlements: dict[str, int] = {}
        self._active = 0
        self._created_at_ms = int(clock_ns()) // 1_000_000

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def created_at_ms(self) -> int:
        return self._created_at_ms

    @staticmethod
    def _validate_slot_id(slot_id: Any) -> str:
        if not isinstance(slot_id, str):
            raise InvalidSlotArgumentError("id", f"slot id must be a string, got {type(slot_id).__name__}")
        if not slot_id.strip():
            raise InvalidSlotArgumentError("id", "slot id cannot be empty")
        return slot_id

    def _validate_timestamp_ns(self, timestamp_ns: Any) -> int:
        if isinstance(timestamp_ns, (bool, np.bool_)) or not isinstance(timestamp_ns, (int, np.integer)):
            raise InvalidSlotArgumentError(
                "timestamp_ns",
                f"timestamp_ns must be an integer nanosecond count, got {type(timestamp_ns).__name__}",
            )
        ts = int(timestamp_ns)
        if ts < INT64_MIN or ts > INT64_MAX:
            raise InvalidSlotArgumentError("timestamp_ns", "timestamp_ns must fit in a signed 64-bit integer")
        if ts + int(self._config.cooling_offset_ns) > INT64_MAX:
            raise InvalidSlotArgumentError("timestamp_ns", "settlement epoch would overflow a signed 64-bit integer")
        return ts

    def register(self, slot_id: str, tier: Tier | int, timestamp_ns: int) -> Slot:
        """Register a new slot and derive its settlement epoch.

        Raises, in check order:
        - `SlotAlreadyExistsError` if `slot_id` is taken.
        - `CapacityExceededError` once `config.max_slots` slots exist.
        - `InvalidSlotArgumentError` for a tier outside {2, 5, 11} or a bad timestamp.

        A failed call leaves the registry untouched.
        """

        sid = self._validate_slot_id(slot_id)
        with self._lock:
            if sid in self._slots:
                logger.debug("Rejected duplicate slot %r", sid)
                raise SlotAlreadyExistsError(sid)
            if self._active >= int(self._config.max_slots):
                logger.debug("Rejected slot %r: registry full (%d)", sid, self._active)
                raise CapacityExceededError(self._config.max_slots)

            tier_v = Tier.from_any(tier)
            ts = self._validate_timestamp_ns(timestamp_ns)

            slot = Slot(id=sid, tier=tier_v, registered_at_ns=ts)
            self._slots[sid] = slot
            self._settlements[sid] = ts + int(self._config.cooling_offset_ns)
            self._active += 1

            logger.debug(
                "Registered slot %r tier=%d settlement=%d (active=%d)",
                sid,
                int(tier_v),
                self._settlements[sid],
                self._active,
            )
            return slot

    def get_settlement_epoch(self, slot_id: str) -> int:
        with self._lock:
            return self._settlements.get(slot_id, 0)

    def get_slot(self, slot_id: str) -> Slot | None:
        with self._lock:
            return self._slots.get(slot_id)

    def all_slot_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._slots)

    def active_count(self) -> int:
        with self._lock:
            return self._active

    def is_cooling_complete(self, slot_id: str, current_time_ns: int) -> bool:
        # Unknown ids settle at 0.
        return self.get_settlement_epoch(slot_id) <= int(current_time_ns)

    def fingerprint(self) -> str:
        with self._lock:
            count = self._active
        return format_fingerprint(
            self._config.fingerprint_salt,
            count,
            self._created_at_ms,
            self._config.fingerprint_identifier,
        )
