from __future__ import annotations

from .slots import registry_to_info, slot_to_item

__all__ = [
    "slot_to_item",
    "registry_to_info",
]
