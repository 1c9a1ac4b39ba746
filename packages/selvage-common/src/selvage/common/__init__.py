from pathlib import Path

from selvage.needle import needle
from .messaging import bus, MessageBus, Renderer

# Ship the default catalogs with this package: <here>/assets/needle/<lang>/
needle.add_root(Path(__file__).parent / "assets")

__all__ = ["bus", "MessageBus", "Renderer", "needle"]
