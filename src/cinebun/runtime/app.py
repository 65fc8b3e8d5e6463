from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.config import RegistryConfig
from ..core.registry import SlotRegistry


def create_app(registry: SlotRegistry | None = None) -> FastAPI:
    """Create the served app.

    Without an explicit registry a fresh one is built from the environment
    (`RegistryConfig.from_env()`), so every app owns its own state.
    """

    if registry is None:
        registry = SlotRegistry(RegistryConfig.from_env())
    return create_api_app(registry)
