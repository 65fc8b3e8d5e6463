from __future__ import annotations

from cinebun.core.config import RegistryConfig
from cinebun.core.constants import CRUMB_ORACLE_ID, FINGERPRINT_SALT
from cinebun.core.fingerprint import format_fingerprint
from cinebun.core.registry import SlotRegistry


def test_format_strips_hex_prefixes() -> None:
    fp = format_fingerprint(0xABC, 7, 1234, "0xdeadbeef", id_chars=6)
    assert fp == "abc-7-1234-dead"
    assert "0x" not in fp


def test_registry_fingerprint_from_defaults() -> None:
    reg = SlotRegistry(clock_ns=lambda: 1_700_000_000_000_000_000)

    assert reg.fingerprint() == f"c1beb0b5-0-1700000000000-{CRUMB_ORACLE_ID[2:12]}"
    assert reg.fingerprint() == "c1beb0b5-0-1700000000000-9f2c4e7a1b"


def test_fingerprint_tracks_active_count_only() -> None:
    reg = SlotRegistry(clock_ns=lambda: 5_000_000)
    first = reg.fingerprint()
    assert first == reg.fingerprint()

    reg.register("a", 2, 1)
    reg.register("b", 11, 2)

    assert reg.fingerprint() == format_fingerprint(FINGERPRINT_SALT, 2, 5, CRUMB_ORACLE_ID)
    assert reg.fingerprint() != first


def test_fingerprint_uses_configured_salt_and_identifier() -> None:
    cfg = RegistryConfig(fingerprint_salt=0x10, fingerprint_identifier="0x0x0xfeed")
    reg = SlotRegistry(cfg, clock_ns=lambda: 0)

    assert reg.fingerprint() == "10-0-0-feed"
