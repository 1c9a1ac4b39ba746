from textwrap import dedent
from typing import Optional

from lxml import etree

from selvage.merge import AttributeFingerprintStrategy
from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS


def parse_xml(text: str) -> etree._Element:
    return etree.fromstring(dedent(text).strip())


def to_xml(element: etree._Element) -> str:
    return etree.tostring(element, encoding="unicode")


def stamp(
    element: etree._Element,
    conventions: MergeConventions = DEFAULT_CONVENTIONS,
    value: Optional[str] = None,
) -> etree._Element:
    """
    Writes a fingerprint onto `element`, the real one unless `value` is
    given. Returns the element for chaining.
    """
    if value is None:
        value = AttributeFingerprintStrategy(conventions).compute(element)
    element.set(conventions.fingerprint_attribute, value)
    return element


def stamp_all(
    root: etree._Element, conventions: MergeConventions = DEFAULT_CONVENTIONS
) -> etree._Element:
    for element in root.iter(etree.Element):
        if element.get(conventions.id_attribute):
            stamp(element, conventions)
    return root
