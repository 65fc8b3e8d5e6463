from __future__ import annotations

from .service import SlotRegistry

__all__ = ["SlotRegistry"]
