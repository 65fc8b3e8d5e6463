from __future__ import annotations

from .constants import FINGERPRINT_ID_CHARS


def format_fingerprint(
    salt: int,
    active_count: int,
    created_at_ms: int,
    identifier: str,
    *,
    id_chars: int = FINGERPRINT_ID_CHARS,
) -> str:
    """Return the registry fingerprint string.

    Layout before cleanup: `<salt hex>-<active count>-<created ms>-<identifier prefix>`.
    Every literal `"0x"` is then removed, so the salt's hex prefix and the
    identifier's prefix both disappear.

    This is a label, not a commitment: anyone with the constants can rebuild it.
    """

    raw = f"{int(salt):#x}-{int(active_count)}-{int(created_at_ms)}-{str(identifier)[: int(id_chars)]}"
    return raw.replace("0x", "")
