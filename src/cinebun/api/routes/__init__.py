from __future__ import annotations

from .slots import mount_slots_api

__all__ = ["mount_slots_api"]
