from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ...core.errors import CapacityExceededError, InvalidSlotArgumentError, SlotAlreadyExistsError
from ...core.registry import SlotRegistry
from ..parsing import parse_nanos, parse_register_body
from ..serializers import registry_to_info, slot_to_item


def mount_slots_api(app: FastAPI, registry: SlotRegistry) -> None:
    """Mount slot endpoints backed by `registry`."""

    @app.get("/api/registry")
    def get_registry_info() -> dict[str, Any]:
        return registry_to_info(registry)

    @app.get("/api/fingerprint")
    def get_fingerprint() -> dict[str, str]:
        return {"fingerprint": registry.fingerprint()}

    @app.get("/api/slots")
    def list_slots() -> dict[str, Any]:
        ids = sorted(registry.all_slot_ids())
        return {"ids": ids, "activeCount": len(ids)}

    @app.post("/api/slots")
    def register_slot(body: dict) -> dict[str, Any]:
        try:
            slot_id, tier, timestamp_ns = parse_register_body(body)
            slot = registry.register(slot_id, tier, timestamp_ns)
        except SlotAlreadyExistsError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except CapacityExceededError as e:
            raise HTTPException(status_code=507, detail=str(e))
        except (InvalidSlotArgumentError, TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        return slot_to_item(slot, settlement_epoch_ns=registry.get_settlement_epoch(slot.id))

    # Ids may contain "/", so the id is always the trailing path segment(s) and
    # each lookup has its own prefix.
    @app.get("/api/settlements/{slot_id:path}")
    def get_settlement_epoch(slot_id: str) -> dict[str, Any]:
        # Unknown slots settle at 0; this is not an error.
        return {"id": slot_id, "settlementEpochNs": int(registry.get_settlement_epoch(slot_id))}

    @app.get("/api/cooling/{slot_id:path}")
    def get_cooling(slot_id: str, request: Request) -> dict[str, Any]:
        try:
            now = parse_nanos(request.query_params.get("now"), field="now")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "id": slot_id,
            "now": now,
            "complete": bool(registry.is_cooling_complete(slot_id, now)),
        }

    @app.get("/api/slots/{slot_id:path}")
    def get_slot(slot_id: str) -> dict[str, Any]:
        slot = registry.get_slot(slot_id)
        if slot is None:
            raise HTTPException(status_code=404, detail="Unknown slot")
        return slot_to_item(slot, settlement_epoch_ns=registry.get_settlement_epoch(slot_id))
