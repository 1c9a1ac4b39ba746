from lxml import etree

from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS


def is_equivalent(
    original: etree._Element,
    proposed: etree._Element,
    conventions: MergeConventions = DEFAULT_CONVENTIONS,
) -> bool:
    """
    Compares two identity-matched elements by tag and attributes only.

    Children are not looked at; the reconciler visits them on its own.
    Bookkeeping attributes of the original may be missing or different on
    the proposed side, but they still count towards the attribute totals,
    so an extra `_`-prefixed attribute on either side breaks equivalence.
    """
    if original.tag != proposed.tag:
        return False

    if len(original.attrib) != len(proposed.attrib):
        return False

    for name, value in original.attrib.items():
        if conventions.is_bookkeeping(name):
            continue
        if proposed.get(name) != value:
            return False

    return True
