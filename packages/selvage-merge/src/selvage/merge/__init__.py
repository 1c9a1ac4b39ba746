from .equivalence import is_equivalent
from .fingerprint import AttributeFingerprintStrategy
from .identity import (
    find_by_identity,
    ScanIdentityIndex,
    HashedIdentityIndex,
    INDEX_TYPES,
)
from .namespaces import sync_root_declarations
from .nodes import identity_key, qualified_name, shallow_copy
from .placement import PlacementStrategy
from .reconciler import Reconciler, merge

__all__ = [
    "merge",
    "Reconciler",
    "PlacementStrategy",
    "is_equivalent",
    "AttributeFingerprintStrategy",
    "find_by_identity",
    "ScanIdentityIndex",
    "HashedIdentityIndex",
    "INDEX_TYPES",
    "sync_root_declarations",
    "identity_key",
    "qualified_name",
    "shallow_copy",
]
