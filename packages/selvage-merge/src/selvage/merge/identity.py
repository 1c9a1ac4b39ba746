import logging
from typing import Dict, Optional

from lxml import etree

from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS
from .nodes import identity_key, iter_elements

log = logging.getLogger(__name__)


def find_by_identity(
    root: etree._Element,
    key: str,
    conventions: MergeConventions = DEFAULT_CONVENTIONS,
) -> Optional[etree._Element]:
    # Duplicate keys are tolerated: the first hit in document order wins.
    if not key:
        return None
    for element in iter_elements(root):
        if identity_key(element, conventions) == key:
            return element
    return None


class ScanIdentityIndex:
    """Searches the whole live tree on every lookup. Nothing to keep in sync."""

    def __init__(
        self, root: etree._Element, conventions: MergeConventions = DEFAULT_CONVENTIONS
    ):
        self.root = root
        self.conventions = conventions

    def find(self, key: str) -> Optional[etree._Element]:
        return find_by_identity(self.root, key, self.conventions)

    def register(self, element: etree._Element) -> None:
        pass

    def invalidate(self) -> None:
        pass


class HashedIdentityIndex:
    """
    Precomputed key -> element map for large documents.

    Built lazily by a document-order traversal that keeps the first
    occurrence of each key, so it answers exactly like a scan would.
    """

    def __init__(
        self, root: etree._Element, conventions: MergeConventions = DEFAULT_CONVENTIONS
    ):
        self.root = root
        self.conventions = conventions
        self._elements: Optional[Dict[str, etree._Element]] = None

    def _build(self) -> Dict[str, etree._Element]:
        elements: Dict[str, etree._Element] = {}
        for element in iter_elements(self.root):
            key = identity_key(element, self.conventions)
            if not key:
                continue
            if key in elements:
                log.debug(f"Duplicate identity '{key}', keeping first occurrence.")
                continue
            elements[key] = element
        return elements

    def find(self, key: str) -> Optional[etree._Element]:
        if not key:
            return None
        if self._elements is None:
            self._elements = self._build()
        return self._elements.get(key)

    def register(self, element: etree._Element) -> None:
        # Only called for keys that were just looked up and not found.
        if self._elements is None:
            return
        key = identity_key(element, self.conventions)
        if key and key not in self._elements:
            self._elements[key] = element

    def invalidate(self) -> None:
        self._elements = None


INDEX_TYPES = {
    "scan": ScanIdentityIndex,
    "hashed": HashedIdentityIndex,
}
