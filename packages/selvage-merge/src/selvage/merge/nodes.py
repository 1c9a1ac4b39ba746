from typing import Dict, Iterator, Optional, Union

from lxml import etree

from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS


DocumentLike = Union[etree._ElementTree, etree._Element]


def root_of(document: DocumentLike) -> etree._Element:
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    return document


def iter_elements(root: etree._Element) -> Iterator[etree._Element]:
    """Pre-order (document order) walk over element nodes, `root` included."""
    return root.iter(etree.Element)


def identity_key(
    element: Optional[etree._Element],
    conventions: MergeConventions = DEFAULT_CONVENTIONS,
) -> str:
    # An empty attribute value is the same as no identity at all.
    if element is None:
        return ""
    return element.get(conventions.id_attribute, "")


def qualified_name(element: etree._Element) -> str:
    """The tag as written in the document: `prefix:local`, or `local`."""
    qname = etree.QName(element)
    if qname.namespace and element.prefix:
        return f"{element.prefix}:{qname.localname}"
    return qname.localname if qname.namespace else element.tag


def shallow_copy(element: etree._Element) -> etree._Element:
    """
    Copy of `element` without children, text or tail.

    Only the namespace of the tag itself is declared on the copy so that the
    original prefix survives; lxml drops the declaration again when the new
    parent already maps the same URI.
    """
    nsmap: Dict[Optional[str], str] = {}
    namespace = etree.QName(element).namespace
    if namespace:
        nsmap[element.prefix] = namespace
    copy = etree.Element(element.tag, nsmap=nsmap or None)
    for name, value in element.attrib.items():
        copy.set(name, value)
    return copy


def replace_element(old: etree._Element, new: etree._Element) -> etree._Element:
    """
    Puts `new` where `old` is, dropping `old` together with its subtree.

    Returns the element now standing in the tree. The document root cannot
    be swapped for another node, so it is rewritten in place instead.
    """
    parent = old.getparent()
    if parent is None:
        old.tag = new.tag
        old.attrib.clear()
        for name, value in new.attrib.items():
            old.set(name, value)
        old.text = None
        del old[:]
        return old

    new.tail = old.tail
    parent.replace(old, new)
    return new
