from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.registry import SlotRegistry
from .routes import mount_slots_api


def create_api_app(registry: SlotRegistry) -> FastAPI:
    """Build the HTTP API around one explicitly owned registry.

    The registry is also reachable as `app.state.registry`.
    """

    app = FastAPI(title="cinebun", version="0.1.0")
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_slots_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app


__all__ = ["create_api_app"]
