import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from .interfaces import FileHandler
from .handlers import JsonHandler

log = logging.getLogger(__name__)


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self.handlers = handlers or [JsonHandler()]

    def _load_and_merge_file(self, path: Path, registry: Dict[str, str]):
        for handler in self.handlers:
            if handler.match(path):
                try:
                    content = handler.load(path)
                except (OSError, ValueError) as e:
                    # Keys of a broken catalog fall back to their identity.
                    log.warning(f"Skipping message catalog {path}: {e}")
                    return
                for key, value in content.items():
                    registry[key] = str(value)
                return

    def load_directory(self, root_path: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}

        if not root_path.is_dir():
            return registry

        # Sorted walk keeps override order deterministic across platforms.
        for dirpath, dirnames, filenames in os.walk(root_path):
            dirnames.sort()
            for filename in sorted(filenames):
                self._load_and_merge_file(Path(dirpath) / filename, registry)

        return registry
