import logging
from typing import Optional

from lxml import etree

from selvage.spec import IdentityIndexProtocol, MergeConventions, DEFAULT_CONVENTIONS
from .nodes import identity_key, iter_elements, qualified_name, shallow_copy

log = logging.getLogger(__name__)


class PlacementStrategy:
    """
    Decides where a proposed element without counterpart lands in the
    original tree. First applicable rule wins:

    1. right before the placeholder marker, wherever it is;
    2. as last child of the original element sharing the proposed parent's id;
    3. as last child of the original root.
    """

    def __init__(self, conventions: MergeConventions = DEFAULT_CONVENTIONS):
        self.conventions = conventions

    def find_placeholder(self, root: etree._Element) -> Optional[etree._Element]:
        for element in iter_elements(root):
            if qualified_name(element) == self.conventions.placeholder_tag:
                return element
        return None

    def place(
        self,
        root: etree._Element,
        proposed: etree._Element,
        index: IdentityIndexProtocol,
    ) -> etree._Element:
        copy = shallow_copy(proposed)

        placeholder = self.find_placeholder(root)
        if placeholder is not None and placeholder.getparent() is not None:
            placeholder.addprevious(copy)
            log.debug(f"Placed '{identity_key(copy, self.conventions)}' before placeholder.")
            return copy

        parent_key = identity_key(proposed.getparent(), self.conventions)
        if parent_key:
            anchor = index.find(parent_key)
            if anchor is not None:
                anchor.append(copy)
                log.debug(
                    f"Placed '{identity_key(copy, self.conventions)}' under '{parent_key}'."
                )
                return copy

        root.append(copy)
        log.debug(f"Placed '{identity_key(copy, self.conventions)}' under document root.")
        return copy
