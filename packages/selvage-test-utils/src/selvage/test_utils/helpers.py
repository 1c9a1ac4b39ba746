from pathlib import Path
from typing import Dict, Optional

from lxml import etree

from selvage.app import SelvageApp
from selvage.config import SelvageConfig, load_config_from_path
from selvage.io import XmlAdapter


def create_test_app(
    root_path: Path, config: Optional[SelvageConfig] = None
) -> SelvageApp:
    return SelvageApp(
        root_path=root_path, config=config or load_config_from_path(root_path)
    )


def get_stored_fingerprints(path: Path, attribute: str = "z") -> Dict[str, str]:
    """Maps identity key -> stored fingerprint for every stamped element of a file."""
    tree = XmlAdapter().load(path)
    if tree is None:
        return {}
    return {
        el.get("id"): el.get(attribute)
        for el in tree.getroot().iter(etree.Element)
        if el.get("id") and el.get(attribute) is not None
    }
