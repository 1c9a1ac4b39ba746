import logging

from lxml import etree

from selvage.spec import MergeConventions, DEFAULT_CONVENTIONS
from .nodes import iter_elements

log = logging.getLogger(__name__)


def sync_root_declarations(
    original_root: etree._Element,
    proposed_root: etree._Element,
    conventions: MergeConventions = DEFAULT_CONVENTIONS,
) -> bool:
    """
    Brings root-level declarations of the proposed document over to the
    original one: prefixed namespaces the original root does not map yet,
    and root attributes whose name appears nowhere in the original tree.
    Bookkeeping attributes (fingerprint, internal prefix) are never copied.

    The default namespace is never touched, since declaring one on an
    existing root would silently move unprefixed descendants into it.
    """
    changed = False

    missing = {
        prefix: uri
        for prefix, uri in proposed_root.nsmap.items()
        if prefix is not None and prefix not in original_root.nsmap
    }
    if missing:
        declared = {
            prefix
            for element in iter_elements(original_root)
            for prefix in element.nsmap
            if prefix is not None
        }
        etree.cleanup_namespaces(
            original_root,
            top_nsmap=missing,
            keep_ns_prefixes=sorted(declared | set(missing)),
        )
        log.debug(f"Declared namespaces on original root: {sorted(missing)}")
        changed = True

    for name, value in proposed_root.attrib.items():
        if conventions.is_bookkeeping(name):
            continue
        if any(name in element.attrib for element in iter_elements(original_root)):
            continue
        original_root.set(name, value)
        log.debug(f"Copied root attribute '{name}' from proposed document.")
        changed = True

    return changed
