from __future__ import annotations

from .slots import coerce_tier, parse_nanos, parse_register_body

__all__ = [
    "coerce_tier",
    "parse_nanos",
    "parse_register_body",
]
