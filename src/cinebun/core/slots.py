from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import numpy as np

from .errors import InvalidSlotArgumentError


class Tier(IntEnum):
    """Frosting tier assigned to a slot at registration.

    Only these three values are accepted by the registry.
    """

    SPRINKLE = 2
    GLAZE = 5
    FONDANT = 11

    @classmethod
    def from_any(cls, value: Any) -> "Tier":
        if isinstance(value, cls):
            return value

        # bool is an int subclass; True/False are never tiers.
        if isinstance(value, (bool, np.bool_)):
            raise InvalidSlotArgumentError("tier", f"Invalid tier: {value!r}")

        if isinstance(value, (int, np.integer)):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidSlotArgumentError(
                    "tier",
                    f"Unsupported tier {int(value)}. Allowed tiers: {', '.join(str(int(t)) for t in cls)}",
                ) from None

        # Tier names (`"glaze"`) are resolved in `api.parsing`.
        raise InvalidSlotArgumentError(
            "tier",
            f"Invalid tier: {value!r}. Use Tier.SPRINKLE / GLAZE / FONDANT (or 2 / 5 / 11).",
        )


@dataclass(frozen=True)
class Slot:
    id: str
    tier: Tier
    registered_at_ns: int
