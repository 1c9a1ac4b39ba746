import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .loader import Loader
from .pointer import SemanticPointer


class Needle:
    """
    Resolves semantic pointers to message templates.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self.roots: List[Path] = list(roots) if roots else []
        self._registry: Dict[str, Dict[str, str]] = {}  # lang -> {key: template}
        self._loader = Loader()
        self._loaded_langs: Set[str] = set()

    def add_root(self, path: Path):
        """Registers another search root; later roots override earlier ones."""
        if path not in self.roots:
            self.roots.append(path)
            self.reset()

    def reset(self):
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str):
        if lang in self._loaded_langs:
            return

        merged_registry: Dict[str, str] = {}
        for root in self.roots:
            # Packaged assets: <root>/needle/<lang>
            asset_path = root / "needle" / lang
            if asset_path.is_dir():
                merged_registry.update(self._loader.load_directory(asset_path))

            # Project overrides: <root>/.selvage/needle/<lang>
            hidden_path = root / ".selvage" / "needle" / lang
            if hidden_path.is_dir():
                merged_registry.update(self._loader.load_directory(hidden_path))

        self._registry[lang] = merged_registry
        self._loaded_langs.add(lang)

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Resolves a semantic pointer to a string value with graceful fallback.

        Lookup Order:
        1. Target Language
        2. Default Language (en)
        3. Identity (the key itself)
        """
        key = str(pointer)
        target_lang = lang or os.getenv("SELVAGE_LANG", self.default_lang)

        self._ensure_lang_loaded(target_lang)
        val = self._registry.get(target_lang, {}).get(key)
        if val is not None:
            return val

        if target_lang != self.default_lang:
            self._ensure_lang_loaded(self.default_lang)
            val = self._registry.get(self.default_lang, {}).get(key)
            if val is not None:
                return val

        return key


# Global Runtime Instance
needle = Needle()
