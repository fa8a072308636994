import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union, Protocol, Optional

log = logging.getLogger(__name__)


class FileSystemAdapter(Protocol):
    def write_text(self, path: Path, content: str) -> None: ...
    def exists(self, path: Path) -> bool: ...
    def read_text(self, path: Path) -> str: ...


class RealFileSystem:
    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the separators exactly as the document holds them.
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()


@dataclass
class FileOp(ABC):
    path: Path

    @abstractmethod
    def execute(self, fs: FileSystemAdapter, root: Path) -> None: ...

    @abstractmethod
    def describe(self) -> str: ...


@dataclass
class WriteFileOp(FileOp):
    content: str

    def execute(self, fs: FileSystemAdapter, root: Path) -> None:
        fs.write_text(root / self.path, self.content)

    def describe(self) -> str:
        return f"[WRITE] {self.path}"


@dataclass
class CreateFileOp(FileOp):
    content: str = ""

    def execute(self, fs: FileSystemAdapter, root: Path) -> None:
        target = root / self.path
        # Never clobber a file that appeared after the op was planned.
        if fs.exists(target):
            log.debug(f"Skipping create of existing file {target}")
            return
        fs.write_text(target, self.content)

    def describe(self) -> str:
        return f"[CREATE] {self.path}"


class TransactionManager:
    def __init__(self, root_path: Path, fs: Optional[FileSystemAdapter] = None):
        self.root_path = root_path
        self.fs = fs or RealFileSystem()
        self._ops: List[FileOp] = []

    def add_write(self, path: Union[str, Path], content: str) -> None:
        self._ops.append(WriteFileOp(Path(path), content))

    def add_create(self, path: Union[str, Path], content: str = "") -> None:
        self._ops.append(CreateFileOp(Path(path), content))

    def preview(self) -> List[str]:
        return [op.describe() for op in self._ops]

    def commit(self) -> None:
        for op in self._ops:
            log.debug(op.describe())
            op.execute(self.fs, self.root_path)
        self._ops.clear()

    @property
    def pending_count(self) -> int:
        return len(self._ops)
