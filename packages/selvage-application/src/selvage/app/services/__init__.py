from .document_manager import DocumentManager, DocumentSyncResult, SyncOutcome
from .fingerprint_stamper import FingerprintStamper

__all__ = [
    "DocumentManager",
    "DocumentSyncResult",
    "SyncOutcome",
    "FingerprintStamper",
]
