from pathlib import Path
from typing import List, Tuple

from selvage.common import bus
from selvage.common.transaction import TransactionManager
from selvage.io import DocumentLoadError
from selvage.needle import L
from selvage.spec import MergeAction
from selvage.app.services import DocumentManager, DocumentSyncResult, SyncOutcome
from selvage.app.types import SyncResult
from ._paths import display_path


class SyncRunner:
    def __init__(self, root_path: Path, doc_manager: DocumentManager):
        self.root_path = root_path
        self.doc_manager = doc_manager

    def _report_decisions(self, result: DocumentSyncResult) -> None:
        if result.report is None:
            return
        for decision in result.report.decisions:
            if decision.action == MergeAction.UNCHANGED:
                continue
            bus.debug(
                L.sync.element.decision,
                action=decision.action.value,
                tag=decision.tag,
                key=decision.key,
            )

    def _report_file(self, result: DocumentSyncResult) -> None:
        path = display_path(result.target, self.root_path)
        self._report_decisions(result)

        if result.outcome == SyncOutcome.CREATED:
            bus.success(L.sync.file.created, path=path)
        elif result.outcome == SyncOutcome.UPDATED:
            bus.success(
                L.sync.file.updated,
                path=path,
                inserted=len(result.report.inserted),
                replaced=len(result.report.replaced),
            )
        else:
            bus.info(L.sync.file.unchanged, path=path)

        if result.report is not None and result.report.protected:
            bus.warning(
                L.sync.file.protected,
                count=len(result.report.protected),
                path=path,
            )

    def run_batch(
        self, pairs: List[Tuple[Path, Path]], tm: TransactionManager
    ) -> SyncResult:
        """
        Merges every (proposed, target) pair. Writes are only planned on `tm`;
        the caller commits them.
        """
        result = SyncResult()
        bus.info(L.sync.run.start, count=len(pairs))

        for proposed_path, target_path in pairs:
            try:
                proposed = self.doc_manager.load_proposed(proposed_path)
                file_result = self.doc_manager.sync(target_path, proposed, tm)
            except DocumentLoadError as e:
                bus.error(
                    L.error.load,
                    path=display_path(Path(e.path), self.root_path),
                    reason=e.reason,
                )
                result.failed.append(self.doc_manager.resolve(target_path))
                continue

            self._report_file(file_result)
            if file_result.outcome == SyncOutcome.CREATED:
                result.created.append(file_result.target)
            elif file_result.outcome == SyncOutcome.UPDATED:
                result.updated.append(file_result.target)
            else:
                result.unchanged.append(file_result.target)

        if result.failed:
            bus.error(L.sync.run.failed, failed=len(result.failed))
        bus.info(
            L.sync.run.complete,
            created=len(result.created),
            updated=len(result.updated),
            unchanged=len(result.unchanged),
        )
        return result
