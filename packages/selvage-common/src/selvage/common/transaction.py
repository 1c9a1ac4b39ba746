from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union


class FileSystemAdapter(Protocol):
    def write_text(self, path: Path, content: str) -> None: ...


class RealFileSystem:
    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@dataclass
class WriteFileOp:
    path: Path
    content: str

    def execute(self, fs: FileSystemAdapter, root: Path) -> None:
        fs.write_text(root / self.path, self.content)

    def describe(self) -> str:
        return f"[WRITE] {self.path}"


class TransactionManager:
    """
    Collects the documents a run wants to write and writes them all at the
    end, so a dry run can show the plan without touching the disk.
    """

    def __init__(
        self,
        root_path: Path,
        fs: Optional[FileSystemAdapter] = None,
        dry_run: bool = False,
    ):
        self.root_path = root_path
        self.fs = fs or RealFileSystem()
        self.dry_run = dry_run
        self._ops: List[WriteFileOp] = []

    def add_write(self, path: Union[str, Path], content: str) -> None:
        self._ops.append(WriteFileOp(Path(path), content))

    def _collapse(self) -> List[WriteFileOp]:
        # Later writes to the same file supersede earlier ones.
        latest: Dict[Path, WriteFileOp] = {}
        for op in self._ops:
            latest.pop(op.path, None)
            latest[op.path] = op
        return list(latest.values())

    def preview(self) -> List[str]:
        return [op.describe() for op in self._collapse()]

    def commit(self) -> None:
        if self.dry_run:
            return
        for op in self._collapse():
            op.execute(self.fs, self.root_path)
        self._ops.clear()

    @property
    def pending_count(self) -> int:
        return len(self._collapse())
