from .check import CheckRunner
from .sync import SyncRunner

__all__ = ["CheckRunner", "SyncRunner"]
