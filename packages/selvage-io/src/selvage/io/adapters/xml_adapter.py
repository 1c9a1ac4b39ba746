import logging
from pathlib import Path
from typing import Optional

from lxml import etree

from selvage.io.interfaces import DocumentAdapter, DocumentLoadError

log = logging.getLogger(__name__)


class XmlAdapter(DocumentAdapter):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _make_parser(self) -> etree.XMLParser:
        # Whitespace, comments and CDATA belong to the user: keep all of them.
        return etree.XMLParser(
            remove_blank_text=False,
            remove_comments=False,
            strip_cdata=False,
            resolve_entities=False,
        )

    def load(self, path: Path) -> Optional[etree._ElementTree]:
        if not path.exists():
            return None

        try:
            return etree.parse(str(path), self._make_parser())
        except etree.XMLSyntaxError as e:
            log.warning(f"Malformed document {path}: {e}")
            raise DocumentLoadError(path, str(e)) from e
        except OSError as e:
            raise DocumentLoadError(path, str(e)) from e

    def loads(self, text: str) -> etree._ElementTree:
        # lxml refuses str input carrying an encoding declaration, go through bytes.
        root = etree.fromstring(text.encode(self.encoding), self._make_parser())
        return root.getroottree()

    def dump(self, tree: etree._ElementTree) -> str:
        text = etree.tostring(
            tree,
            encoding=self.encoding,
            xml_declaration=True,
        ).decode(self.encoding)
        return text + "\n"

