from .core import SelvageApp
from .services import DocumentManager, FingerprintStamper, SyncOutcome
from .types import CheckResult, SyncResult

__all__ = [
    "SelvageApp",
    "DocumentManager",
    "FingerprintStamper",
    "SyncOutcome",
    "CheckResult",
    "SyncResult",
]
