from __future__ import annotations


class SlotRegistryError(Exception):
    """Base class for every error raised by the slot registry."""


class SlotAlreadyExistsError(SlotRegistryError):
    def __init__(self, slot_id: str) -> None:
        super().__init__(f"Slot '{slot_id}' is already registered")
        self.slot_id = slot_id


class CapacityExceededError(SlotRegistryError):
    def __init__(self, max_slots: int) -> None:
        super().__init__(f"Registry is full ({int(max_slots)} active slots)")
        self.max_slots = int(max_slots)


class InvalidSlotArgumentError(SlotRegistryError, ValueError):
    """Raised when a registration argument is outside its allowed domain.

    `field` names the offending argument (`"id"`, `"tier"` or `"timestamp_ns"`).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
