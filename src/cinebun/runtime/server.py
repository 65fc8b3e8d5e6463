from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..core.config import RegistryConfig
from ..core.registry import SlotRegistry
from ..core.slots import Slot, Tier
from ..sdk.client import CineBunClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CineBunServer:
    host: str
    port: int
    url: str
    registry: SlotRegistry = field(repr=False, compare=False)
    _server: uvicorn.Server = field(repr=False, compare=False)
    _thread: threading.Thread = field(repr=False, compare=False)

    def as_client(self) -> CineBunClient:
        return CineBunClient(self.url.rstrip("/"))

    # In-process shortcuts; they hit the same registry the HTTP API serves.
    def register(self, slot_id: str, tier: Tier | int, timestamp_ns: int) -> Slot:
        return self.registry.register(slot_id, tier, timestamp_ns)

    def get_slot(self, slot_id: str) -> Slot | None:
        return self.registry.get_slot(slot_id)

    def get_settlement_epoch(self, slot_id: str) -> int:
        return self.registry.get_settlement_epoch(slot_id)

    def is_cooling_complete(self, slot_id: str, current_time_ns: int) -> bool:
        return self.registry.is_cooling_complete(slot_id, current_time_ns)

    def all_slot_ids(self) -> frozenset[str]:
        return self.registry.all_slot_ids()

    def active_count(self) -> int:
        return self.registry.active_count()

    def fingerprint(self) -> str:
        return self.registry.fingerprint()

    def stop(self, *, timeout_s: float = 5.0) -> None:
        """Ask uvicorn to exit and wait for the serving thread."""
        self._server.should_exit = True
        self._thread.join(timeout=timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort check of whether a cinebun server is reachable."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            data = r.json()
            return isinstance(data, dict) and bool(data.get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    registry: SlotRegistry | None = None,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 5.0,
) -> CineBunServer | CineBunClient:
    """Start a cinebun server with a single Python call.

    Behavior:
    - If CINEBUN_URL is set, we *attach* to that existing server (client mode) unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it (client mode) unless `new_server=True`.
    - Otherwise we start a new local server and return a `CineBunServer` that owns
      `registry` (a fresh one built from the environment when omitted).

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - Attaching ignores `registry`; the remote server keeps its own state.
    """

    env_url = _normalize_base_url(os.getenv("CINEBUN_URL", ""))

    # 1) Try attaching to an explicitly provided server.
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attached to cinebun server at %s", env_url)
            return CineBunClient(env_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attached to cinebun server at %s", default_url)
            return CineBunClient(default_url)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    if registry is None:
        registry = SlotRegistry(RegistryConfig.from_env())
    app = create_app(registry)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, name="cinebun-uvicorn", daemon=True)
    thread.start()

    deadline = time.monotonic() + float(startup_timeout_s)
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"cinebun server failed to start on {host}:{port}")
        if time.monotonic() >= deadline:
            server.should_exit = True
            thread.join(timeout=max(float(startup_timeout_s), 1.0))
            raise RuntimeError(f"cinebun server did not start within {startup_timeout_s}s")
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("cinebun server listening on %s", url)
    return CineBunServer(host=host, port=port, url=url, registry=registry, _server=server, _thread=thread)
