from pathlib import Path
from typing import Optional, Protocol

from lxml import etree


class DocumentLoadError(Exception):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load {path}: {reason}")


class DocumentAdapter(Protocol):
    """
    Protocol for markup storage adapters.

    Responsible for turning a physical file into a mutable document tree and
    back, without reformatting anything the merge did not touch.
    """

    def load(self, path: Path) -> Optional[etree._ElementTree]:
        """
        Loads the document at `path`.

        Returns:
            The parsed tree, or None if the file does not exist.

        Raises:
            DocumentLoadError: the file exists but cannot be read or parsed.
        """
        ...

    def loads(self, text: str) -> etree._ElementTree: ...

    def dump(self, tree: etree._ElementTree) -> str: ...
