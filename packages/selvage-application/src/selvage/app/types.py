from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class SyncResult:
    created: List[Path] = field(default_factory=list)
    updated: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed


@dataclass
class CheckResult:
    outdated: List[Path] = field(default_factory=list)
    missing: List[Path] = field(default_factory=list)
    up_to_date: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not (self.outdated or self.missing or self.failed)
