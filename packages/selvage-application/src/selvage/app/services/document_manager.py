import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from lxml import etree

from selvage.common.transaction import TransactionManager
from selvage.io import DocumentAdapter, DocumentLoadError
from selvage.merge import Reconciler
from selvage.spec import MergeReport
from .fingerprint_stamper import FingerprintStamper

log = logging.getLogger(__name__)


class SyncOutcome(str, Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    UNCHANGED = "UNCHANGED"


@dataclass
class DocumentSyncResult:
    target: Path
    outcome: SyncOutcome
    report: Optional[MergeReport] = None


class DocumentManager:
    def __init__(
        self,
        root_path: Path,
        adapter: DocumentAdapter,
        reconciler: Reconciler,
        stamper: FingerprintStamper,
    ):
        self.root_path = root_path
        self.adapter = adapter
        self.reconciler = reconciler
        self.stamper = stamper

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.root_path / path

    def load_proposed(self, path: Union[str, Path]) -> etree._ElementTree:
        abs_path = self.resolve(path)
        tree = self.adapter.load(abs_path)
        if tree is None:
            raise DocumentLoadError(abs_path, "file not found")
        # Generated content carries its stamp before it meets the original,
        # so unchanged elements compare equal attribute for attribute.
        self.stamper.stamp_tree(tree.getroot())
        return tree

    def _merge(
        self, target_path: Path, proposed: etree._ElementTree
    ) -> Tuple[Optional[etree._ElementTree], DocumentSyncResult]:
        original = self.adapter.load(target_path)
        if original is None:
            return None, DocumentSyncResult(target_path, SyncOutcome.CREATED)

        report = self.reconciler.reconcile(original, proposed)
        outcome = SyncOutcome.UPDATED if report.changed else SyncOutcome.UNCHANGED
        return original, DocumentSyncResult(target_path, outcome, report)

    def sync(
        self,
        target: Union[str, Path],
        proposed: etree._ElementTree,
        tm: TransactionManager,
    ) -> DocumentSyncResult:
        target_path = self.resolve(target)
        original, result = self._merge(target_path, proposed)

        if result.outcome == SyncOutcome.CREATED:
            tm.add_write(target_path, self.adapter.dump(proposed))
        elif result.outcome == SyncOutcome.UPDATED:
            touched = result.report.touched_elements(original.getroot())
            self.stamper.stamp(touched)
            tm.add_write(target_path, self.adapter.dump(original))
        else:
            # Leave the file and its timestamp alone.
            log.debug(f"{target_path} is up to date")

        return result

    def check(
        self, target: Union[str, Path], proposed: etree._ElementTree
    ) -> DocumentSyncResult:
        """Same decision as `sync`, nothing is written."""
        _, result = self._merge(self.resolve(target), proposed)
        return result
