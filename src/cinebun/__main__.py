from __future__ import annotations

import argparse
import logging
import sys
import time

from .core.config import RegistryConfig
from .core.registry import SlotRegistry
from .runtime.server import run


def main() -> None:
    p = argparse.ArgumentParser(prog="cinebun", description="cinebun: in-memory slot registry server")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    p.add_argument("--max-slots", type=int, default=None, help="override CINEBUN_MAX_SLOTS")
    args = p.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    config = RegistryConfig.from_env()
    if args.max_slots is not None:
        try:
            config = RegistryConfig(
                max_slots=args.max_slots,
                cooling_offset_ns=config.cooling_offset_ns,
            ).validate()
        except ValueError as e:
            p.error(str(e))

    srv = run(
        host=args.host,
        port=args.port,
        registry=SlotRegistry(config),
        log_level=args.log_level,
        new_server=True,
    )
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
