import os
from pathlib import Path
from typing import Dict, Optional, Union, List

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "OWNERFILE_LANG"


def find_project_root(start_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Searches upwards for the project root.
    Search priority per directory: pyproject.toml -> .git
    """
    start = (start_dir or Path.cwd()).resolve()
    current_dir = start
    while True:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").exists():
            return current_dir
        if current_dir.parent == current_dir:
            return None
        current_dir = current_dir.parent


class Needle:
    """
    Resolves semantic pointers to message templates.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self._registry: Dict[str, Dict[str, str]] = {}  # lang -> {fqn: value}
        self._loader = Loader()
        self._loaded_langs: set = set()

        if roots is not None:
            self.roots = list(roots)
        else:
            project_root = find_project_root()
            self.roots = [project_root] if project_root else []

    def add_root(self, path: Path):
        """Adds a search root in front of the existing ones (lowest priority)."""
        if path not in self.roots:
            self.roots.insert(0, path)
            self.reset()

    def reset(self):
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str):
        if lang in self._loaded_langs:
            return

        merged_registry: Dict[str, str] = {}

        # Earlier roots are defaults, later roots are overrides.
        for root in self.roots:
            asset_path = root / "needle" / lang
            if asset_path.is_dir():
                merged_registry.update(self._loader.load_directory(asset_path))

            hidden_path = root / ".ownerfile" / "needle" / lang
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
        target_lang = lang or os.getenv(LANG_ENV_VAR, self.default_lang)

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


needle = Needle()
