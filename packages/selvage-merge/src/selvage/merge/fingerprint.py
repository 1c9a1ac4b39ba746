import base64
import hashlib

from lxml import etree

from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS
from .nodes import qualified_name


class AttributeFingerprintStrategy:
    """
    SHA-1 over the qualified tag name followed by every non-bookkeeping
    attribute as `name + value`, sorted by name, Base64 encoded.

    Children and text do not take part: every identified descendant carries
    its own fingerprint.
    """

    def __init__(self, conventions: MergeConventions = DEFAULT_CONVENTIONS):
        self.conventions = conventions

    def canonical_form(self, element: etree._Element) -> str:
        parts = [qualified_name(element)]
        for name in sorted(element.attrib.keys()):
            if self.conventions.is_bookkeeping(name):
                continue
            parts.append(f"{name}{element.get(name)}")
        return "".join(parts)

    def compute(self, element: etree._Element) -> str:
        digest = hashlib.sha1(self.canonical_form(element).encode("utf-8")).digest()
        return base64.b64encode(digest).decode("ascii")
