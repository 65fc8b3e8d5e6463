from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import COOLING_OFFSET_NS, CRUMB_ORACLE_ID, FINGERPRINT_SALT, MAX_ACTIVE_SLOTS


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as ex:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from ex


@dataclass(frozen=True)
class RegistryConfig:
    """Tunable knobs of a `SlotRegistry`.

    Defaults mirror `cinebun.core.constants`. Overriding them is meant for
    tests and local experiments; published fingerprints assume the defaults.
    """

    max_slots: int = MAX_ACTIVE_SLOTS
    cooling_offset_ns: int = COOLING_OFFSET_NS
    fingerprint_salt: int = FINGERPRINT_SALT
    fingerprint_identifier: str = CRUMB_ORACLE_ID

    def validate(self) -> "RegistryConfig":
        if int(self.max_slots) <= 0:
            raise ValueError("max_slots must be a positive integer")
        if int(self.cooling_offset_ns) < 0:
            raise ValueError("cooling_offset_ns must be >= 0")
        if int(self.fingerprint_salt) < 0:
            raise ValueError("fingerprint_salt must be >= 0")
        return self

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Build a config from `CINEBUN_MAX_SLOTS` / `CINEBUN_COOLING_OFFSET_NS`."""
        return cls(
            max_slots=_env_int("CINEBUN_MAX_SLOTS", MAX_ACTIVE_SLOTS),
            cooling_offset_ns=_env_int("CINEBUN_COOLING_OFFSET_NS", COOLING_OFFSET_NS),
        ).validate()
