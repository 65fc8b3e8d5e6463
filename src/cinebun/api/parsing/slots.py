from __future__ import annotations

from typing import Any

import numpy as np

from ...core.slots import Tier


def parse_nanos(value: Any, *, field: str) -> int:
    """Parse an integer nanosecond count from JSON or a query string.

    Integral floats (`1000.0`) are accepted; fractional or non-finite values are not.
    """

    if value is None:
        raise ValueError(f"Missing {field}")
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not np.isfinite(value) or not float(value).is_integer():
            raise ValueError(f"Invalid {field}")
        return int(value)

    s = str(value).strip()
    try:
        return int(s)
    except ValueError:
        pass
    try:
        f = float(s)
    except ValueError as ex:
        raise ValueError(f"Invalid {field}") from ex
    if not np.isfinite(f) or not f.is_integer():
        raise ValueError(f"Invalid {field}")
    return int(f)


def coerce_tier(value: Any) -> Any:
    """Resolve HTTP-only tier spellings (`"5"`, `" glaze "`) to a `Tier`.

    Anything unrecognized is returned unchanged so the registry rejects it in
    its usual check order.
    """

    if not isinstance(value, str):
        return value
    v = value.strip()
    try:
        return int(v)
    except ValueError:
        pass
    by_name = {t.name.lower(): t for t in Tier}
    return by_name.get(v.lower(), value)


def parse_register_body(body: dict[str, Any]) -> tuple[str, Any, int]:
    """Return `(id, tier, timestamp_ns)`.

    Tier spellings are normalized with `coerce_tier`; the registry validates
    the value after the duplicate and capacity checks.
    """

    if not isinstance(body, dict):
        raise ValueError("Body must be a JSON object")

    raw_id = body.get("id")
    if raw_id is None:
        raise ValueError("Missing id")
    if not isinstance(raw_id, str):
        raise ValueError("Invalid id")

    if "tier" not in body:
        raise ValueError("Missing tier")
    tier = coerce_tier(body.get("tier"))

    timestamp_ns = parse_nanos(body.get("timestampNs"), field="timestampNs")
    return raw_id, tier, timestamp_ns
