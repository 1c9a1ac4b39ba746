import logging
from pathlib import Path
from typing import List, Optional, Tuple

from selvage.common import bus
from selvage.common.transaction import TransactionManager
from selvage.config import SelvageConfig
from selvage.io import DocumentAdapter, XmlAdapter
from selvage.merge import AttributeFingerprintStrategy, INDEX_TYPES, Reconciler
from selvage.needle import L, needle
from selvage.spec import FingerprintStrategyProtocol
from .runners import CheckRunner, SyncRunner
from .services import DocumentManager, FingerprintStamper
from .types import CheckResult, SyncResult

log = logging.getLogger(__name__)

DocumentPair = Tuple[Path, Path]


class SelvageApp:
    def __init__(
        self,
        root_path: Path,
        config: Optional[SelvageConfig] = None,
        adapter: Optional[DocumentAdapter] = None,
        fingerprint_strategy: Optional[FingerprintStrategyProtocol] = None,
    ):
        self.root_path = root_path
        self.config = config or SelvageConfig()
        # Project-level message overrides live under <root>/.selvage/needle
        needle.add_root(root_path)

        conventions = self.config.conventions
        strategy = fingerprint_strategy or AttributeFingerprintStrategy(conventions)
        self.reconciler = Reconciler(
            conventions=conventions,
            fingerprint_strategy=strategy,
            index_factory=INDEX_TYPES[self.config.identity_index],
            sync_declarations=self.config.sync_namespaces,
        )
        self.stamper = FingerprintStamper(strategy, conventions)
        self.doc_manager = DocumentManager(
            root_path, adapter or XmlAdapter(), self.reconciler, self.stamper
        )
        self.sync_runner = SyncRunner(root_path, self.doc_manager)
        self.check_runner = CheckRunner(root_path, self.doc_manager)

    def _resolve_pairs(self, pairs: Optional[List[DocumentPair]]) -> List[DocumentPair]:
        if pairs is not None:
            return pairs
        base = self.config.root_path or self.root_path
        return [
            (base / proposed, base / target)
            for target, proposed in self.config.documents.items()
        ]

    def run_sync(
        self, pairs: Optional[List[DocumentPair]] = None, dry_run: bool = False
    ) -> SyncResult:
        pairs = self._resolve_pairs(pairs)
        if not pairs:
            bus.warning(L.sync.run.empty)
            return SyncResult()

        tm = TransactionManager(self.root_path, dry_run=dry_run)
        result = self.sync_runner.run_batch(pairs, tm)

        if dry_run:
            for operation in tm.preview():
                bus.info(L.sync.run.dry_run, operation=operation)
        log.debug(f"Committing {tm.pending_count} write(s), dry_run={dry_run}")
        tm.commit()
        return result

    def run_check(self, pairs: Optional[List[DocumentPair]] = None) -> bool:
        return self.check(pairs).success

    def check(self, pairs: Optional[List[DocumentPair]] = None) -> CheckResult:
        pairs = self._resolve_pairs(pairs)
        if not pairs:
            bus.warning(L.sync.run.empty)
            return CheckResult()
        return self.check_runner.run_batch(pairs)
