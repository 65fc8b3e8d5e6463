from __future__ import annotations


def test_run_auto_attaches_to_existing_server() -> None:
    """If a server is reachable at host/port, cinebun.run() should attach by default."""

    import cinebun

    server = cinebun.run(host="127.0.0.1", port=0, new_server=True)
    try:
        attached = cinebun.run(host=server.host, port=server.port)

        from cinebun.sdk.client import CineBunClient

        assert isinstance(attached, CineBunClient)
        assert attached.base_url.rstrip("/") == f"http://{server.host}:{server.port}"
    finally:
        server.stop()


def test_run_new_server_forces_start_even_if_env_url_is_set() -> None:
    import os

    import cinebun

    s1 = cinebun.run(host="127.0.0.1", port=0, new_server=True)

    os.environ["CINEBUN_URL"] = f"http://{s1.host}:{s1.port}"
    try:
        # new_server=True should ignore CINEBUN_URL and start a fresh server.
        s2 = cinebun.run(host="127.0.0.1", port=0, new_server=True)
        attached = cinebun.run(host="127.0.0.1", port=0)
    finally:
        os.environ.pop("CINEBUN_URL", None)

    from cinebun.runtime.server import CineBunServer
    from cinebun.sdk.client import CineBunClient

    try:
        assert isinstance(s2, CineBunServer)
        assert (s2.host, s2.port) != (s1.host, s1.port)
        assert s2.registry is not s1.registry

        assert isinstance(attached, CineBunClient)
        assert attached.base_url == f"http://{s1.host}:{s1.port}"
    finally:
        s2.stop()
        s1.stop()


def test_liveness_check_rejects_non_object_health_payload(monkeypatch) -> None:
    import httpx

    from cinebun.runtime.server import _is_server_alive

    real_client = httpx.Client

    def _client_with(payload):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
        return lambda **kwargs: real_client(transport=transport, **kwargs)

    monkeypatch.setattr(httpx, "Client", _client_with([1, 2]))
    assert _is_server_alive("http://example.invalid") is False

    monkeypatch.setattr(httpx, "Client", _client_with("ok"))
    assert _is_server_alive("http://example.invalid") is False

    monkeypatch.setattr(httpx, "Client", _client_with({"ok": True}))
    assert _is_server_alive("http://example.invalid") is True


def test_startup_timeout_stops_the_serving_thread(monkeypatch) -> None:
    import threading
    import time

    import pytest
    import uvicorn

    import cinebun

    def _never_starts(self, sockets=None) -> None:
        while not self.should_exit:
            time.sleep(0.005)

    monkeypatch.setattr(uvicorn.Server, "run", _never_starts)
    before = set(threading.enumerate())

    with pytest.raises(RuntimeError, match="did not start"):
        cinebun.run(host="127.0.0.1", port=0, new_server=True, startup_timeout_s=0.05)

    leftover = [t for t in threading.enumerate() if t not in before and t.name == "cinebun-uvicorn"]
    assert leftover == []
