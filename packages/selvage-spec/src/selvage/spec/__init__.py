# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .conventions import MergeConventions, DEFAULT_CONVENTIONS
from .models import MergeAction, MergeDecision, MergeReport
from .protocols import (
    IdentityIndexProtocol,
    FingerprintStrategyProtocol,
)

__all__ = [
    "MergeConventions",
    "DEFAULT_CONVENTIONS",
    "MergeAction",
    "MergeDecision",
    "MergeReport",
    "IdentityIndexProtocol",
    "FingerprintStrategyProtocol",
]
