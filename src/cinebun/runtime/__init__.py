from __future__ import annotations

from .app import create_app
from .server import CineBunServer, run

__all__ = ["create_app", "CineBunServer", "run"]
