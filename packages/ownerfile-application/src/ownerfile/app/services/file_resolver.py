import logging
from pathlib import Path
from typing import Optional

from ownerfile.common import TransactionManager, FileSystemAdapter, RealFileSystem

log = logging.getLogger(__name__)


class DirectoryFileResolver:
    def __init__(self, directory: Path, fs: Optional[FileSystemAdapter] = None):
        self.directory = directory
        self.fs = fs or RealFileSystem()

    def find_file(self, name: str) -> Optional[Path]:
        candidate = self.directory / name
        if self.fs.exists(candidate):
            return candidate
        return None

    def create_file(self, name: str, content: str) -> Path:
        tm = TransactionManager(self.directory, fs=self.fs)
        tm.add_create(name, content)
        log.debug(f"Creating {self.directory / name}: {tm.preview()}")
        tm.commit()
        return self.directory / name
