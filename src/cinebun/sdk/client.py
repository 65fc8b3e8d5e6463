from __future__ import annotations

from datetime import datetime
from typing import Any
from urllib.parse import quote

from ..core.errors import CapacityExceededError, InvalidSlotArgumentError, SlotAlreadyExistsError
from ..core.slots import Slot, Tier
from .time_context import now_ns, to_unix_nanos


def _slot_path(prefix: str, slot_id: str) -> str:
    # Ids may hold "/", "#" or "?"; escape everything.
    return f"/api/{prefix}/{quote(str(slot_id), safe='')}"


def _detail(res: Any) -> str:
    try:
        data = res.json()
    except ValueError:
        return str(res.text)
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(res.text)


def _slot_from_item(item: dict[str, Any]) -> Slot:
    return Slot(
        id=str(item["id"]),
        tier=Tier.from_any(item["tier"]),
        registered_at_ns=int(item["timestampNs"]),
    )


class CineBunClient:
    """HTTP client for a running cinebun server.

    Mirrors the in-process `SlotRegistry` API. Registration failures come back
    as the same exception types the registry raises locally.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000") -> None:
        self.base_url = base_url.rstrip("/")

    def register_slot(
        self,
        slot_id: str,
        tier: Tier | int | str,
        timestamp: int | float | datetime | None = None,
        *,
        timeout_s: float = 10.0,
    ) -> Slot:
        """Register a slot on the server.

        `timestamp` defaults to the local wall clock. Ints are nanoseconds,
        floats are seconds (see `to_unix_nanos`).
        """
        import httpx

        ts = to_unix_nanos(timestamp)
        if ts is None:
            ts = now_ns()
        tier_v: int | str = int(tier) if isinstance(tier, Tier) else tier

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post("/api/slots", json={"id": slot_id, "tier": tier_v, "timestampNs": int(ts)})

        if res.status_code == 409:
            raise SlotAlreadyExistsError(slot_id)
        if res.status_code == 507:
            info = self.get_registry_info(timeout_s=timeout_s)
            raise CapacityExceededError(int(info.get("maxSlots", 0)))
        if res.status_code == 400:
            raise InvalidSlotArgumentError("request", _detail(res))
        if res.status_code >= 400:
            raise RuntimeError(f"Slot registration failed: {res.status_code} {res.text}")
        return _slot_from_item(res.json())

    def get_slot(self, slot_id: str, *, timeout_s: float = 10.0) -> Slot | None:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(_slot_path("slots", slot_id))
        if res.status_code == 404:
            return None
        if res.status_code >= 400:
            raise RuntimeError(f"Failed to get slot: {res.status_code} {res.text}")
        return _slot_from_item(res.json())

    def get_settlement_epoch(self, slot_id: str, *, timeout_s: float = 10.0) -> int:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(_slot_path("settlements", slot_id))
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to get settlement epoch: {res.status_code} {res.text}")
            return int(res.json()["settlementEpochNs"])

    def is_cooling_complete(
        self,
        slot_id: str,
        current_time: int | float | datetime | None = None,
        *,
        timeout_s: float = 10.0,
    ) -> bool:
        import httpx

        now = to_unix_nanos(current_time)
        if now is None:
            now = now_ns()

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(_slot_path("cooling", slot_id), params={"now": str(int(now))})
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to check cooling: {res.status_code} {res.text}")
            return bool(res.json()["complete"])

    def all_slot_ids(self, *, timeout_s: float = 10.0) -> frozenset[str]:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/slots")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to list slots: {res.status_code} {res.text}")
            return frozenset(str(i) for i in res.json()["ids"])

    def active_count(self, *, timeout_s: float = 10.0) -> int:
        return int(self.get_registry_info(timeout_s=timeout_s)["activeCount"])

    def fingerprint(self, *, timeout_s: float = 10.0) -> str:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/fingerprint")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to get fingerprint: {res.status_code} {res.text}")
            return str(res.json()["fingerprint"])

    def get_registry_info(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/registry")
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to get registry info: {res.status_code} {res.text}")
            return dict(res.json())
