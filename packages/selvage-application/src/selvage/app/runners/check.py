from pathlib import Path
from typing import List, Tuple

from selvage.common import bus
from selvage.io import DocumentLoadError
from selvage.needle import L
from selvage.app.services import DocumentManager, SyncOutcome
from selvage.app.types import CheckResult
from ._paths import display_path


class CheckRunner:
    """Runs the full merge in memory and reports which targets would change."""

    def __init__(self, root_path: Path, doc_manager: DocumentManager):
        self.root_path = root_path
        self.doc_manager = doc_manager

    def run_batch(self, pairs: List[Tuple[Path, Path]]) -> CheckResult:
        result = CheckResult()

        for proposed_path, target_path in pairs:
            try:
                proposed = self.doc_manager.load_proposed(proposed_path)
                file_result = self.doc_manager.check(target_path, proposed)
            except DocumentLoadError as e:
                bus.error(
                    L.error.load,
                    path=display_path(Path(e.path), self.root_path),
                    reason=e.reason,
                )
                result.failed.append(self.doc_manager.resolve(target_path))
                continue

            path = display_path(file_result.target, self.root_path)
            if file_result.outcome == SyncOutcome.CREATED:
                bus.warning(L.check.file.missing, path=path)
                result.missing.append(file_result.target)
            elif file_result.outcome == SyncOutcome.UPDATED:
                bus.warning(
                    L.check.file.outdated,
                    path=path,
                    inserted=len(file_result.report.inserted),
                    replaced=len(file_result.report.replaced),
                )
                result.outdated.append(file_result.target)
            else:
                result.up_to_date.append(file_result.target)

        if result.success:
            bus.success(L.check.run.success, count=len(result.up_to_date))
        else:
            bus.error(
                L.check.run.fail,
                count=len(result.outdated) + len(result.missing) + len(result.failed),
            )
        return result
