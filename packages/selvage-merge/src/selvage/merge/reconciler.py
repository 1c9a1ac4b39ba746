import logging
from typing import Callable, Optional

from lxml import etree

from selvage.spec import (
    DEFAULT_CONVENTIONS,
    FingerprintStrategyProtocol,
    IdentityIndexProtocol,
    MergeAction,
    MergeConventions,
    MergeDecision,
    MergeReport,
)
from .equivalence import is_equivalent
from .fingerprint import AttributeFingerprintStrategy
from .identity import ScanIdentityIndex
from .namespaces import sync_root_declarations
from .nodes import DocumentLike, identity_key, replace_element, root_of, shallow_copy
from .placement import PlacementStrategy

log = logging.getLogger(__name__)

IndexFactory = Callable[[etree._Element, MergeConventions], IdentityIndexProtocol]


class Reconciler:
    """
    Folds a freshly generated (proposed) document into a previously
    generated, possibly hand-edited (original) one.

    The proposed tree is walked in document order. Each element carrying an
    identity key is looked up anywhere in the original tree and then:

    - inserted (shallow copy, see PlacementStrategy) when it has no match;
    - left alone when the match is equivalent;
    - replaced by a shallow copy when the match differs and its stored
      fingerprint still equals a fresh computation, i.e. nobody edited it;
    - left alone otherwise, as user-owned content.

    Children are always visited afterwards, against the now-updated
    original, so an inserted or replaced subtree is rebuilt node by node.
    """

    def __init__(
        self,
        conventions: Optional[MergeConventions] = None,
        fingerprint_strategy: Optional[FingerprintStrategyProtocol] = None,
        placement: Optional[PlacementStrategy] = None,
        index_factory: Optional[IndexFactory] = None,
        sync_declarations: bool = False,
    ):
        self.conventions = conventions or DEFAULT_CONVENTIONS
        self.fingerprint_strategy = fingerprint_strategy or AttributeFingerprintStrategy(
            self.conventions
        )
        self.placement = placement or PlacementStrategy(self.conventions)
        self.index_factory = index_factory or ScanIdentityIndex
        self.sync_declarations = sync_declarations

    def reconcile(self, original: DocumentLike, proposed: DocumentLike) -> MergeReport:
        original_root = root_of(original)
        proposed_root = root_of(proposed)
        report = MergeReport()

        if self.sync_declarations:
            report.declarations_changed = sync_root_declarations(
                original_root, proposed_root, self.conventions
            )

        index = self.index_factory(original_root, self.conventions)
        changed = self._walk(original_root, proposed_root, index, report, False)
        log.debug(
            f"Merge finished: changed={changed}, "
            f"inserted={len(report.inserted)}, replaced={len(report.replaced)}, "
            f"protected={len(report.protected)}"
        )
        return report

    def _walk(
        self,
        original_root: etree._Element,
        proposed_node: etree._Element,
        index: IdentityIndexProtocol,
        report: MergeReport,
        changed: bool,
    ) -> bool:
        for proposed_child in proposed_node.iterchildren(etree.Element):
            key = identity_key(proposed_child, self.conventions)
            if key:
                decision = self._reconcile_element(
                    original_root, proposed_child, key, index
                )
                report.record(decision)
                log.debug(f"{decision.action.value}: <{decision.tag} id='{key}'>")
                changed = decision.is_change or changed
            changed = self._walk(original_root, proposed_child, index, report, changed)
        return changed

    def _reconcile_element(
        self,
        original_root: etree._Element,
        proposed: etree._Element,
        key: str,
        index: IdentityIndexProtocol,
    ) -> MergeDecision:
        tag = proposed.tag
        original = index.find(key)

        if original is None:
            inserted = self.placement.place(original_root, proposed, index)
            index.register(inserted)
            return MergeDecision(key, tag, MergeAction.INSERTED, inserted)

        if is_equivalent(original, proposed, self.conventions):
            return MergeDecision(key, tag, MergeAction.UNCHANGED)

        stored = original.get(self.conventions.fingerprint_attribute)
        if not stored:
            return MergeDecision(key, tag, MergeAction.PROTECTED_UNSTAMPED)

        if stored != self.fingerprint_strategy.compute(original):
            return MergeDecision(key, tag, MergeAction.PROTECTED_MODIFIED)

        replacement = replace_element(original, shallow_copy(proposed))
        index.invalidate()
        return MergeDecision(key, tag, MergeAction.REPLACED, replacement)


def merge(
    original: DocumentLike,
    proposed: DocumentLike,
    conventions: Optional[MergeConventions] = None,
    fingerprint_strategy: Optional[FingerprintStrategyProtocol] = None,
    index_factory: Optional[IndexFactory] = None,
) -> bool:
    """
    Mutates `original` in place; returns True if it needs to be persisted.
    """
    reconciler = Reconciler(
        conventions=conventions,
        fingerprint_strategy=fingerprint_strategy,
        index_factory=index_factory,
    )
    return reconciler.reconcile(original, proposed).changed
