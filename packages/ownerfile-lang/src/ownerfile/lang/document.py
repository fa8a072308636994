import logging
from pathlib import Path
from typing import List, Optional

from ownerfile.common import TransactionManager, FileSystemAdapter, RealFileSystem
from ownerfile.domain import DocumentError, ReadOnlyDocumentError
from .constants import LINE_SEPARATOR

log = logging.getLogger(__name__)


def normalize_separators(text: str) -> str:
    return text.replace("\r\n", LINE_SEPARATOR)


class TextDocument:
    """
    In-memory text buffer implementing the DocumentView protocol.

    Text only ever grows through `insert_string`; line start offsets are
    recomputed lazily after each mutation.
    """

    def __init__(self, text: str = "", name: str = "<memory>", read_only: bool = False):
        self.name = name
        self.read_only = read_only
        self._text = normalize_separators(text)
        self._line_starts: Optional[List[int]] = None
        self._dirty = False

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def read_text(self) -> str:
        return self._text

    def text_length(self) -> int:
        return len(self._text)

    def ends_with_separator(self) -> bool:
        return self._text.endswith(LINE_SEPARATOR)

    def line_count(self) -> int:
        return len(self._get_line_starts())

    def line_start_offset(self, line: int) -> int:
        starts = self._get_line_starts()
        if line < 0 or line >= len(starts):
            raise DocumentError(
                f"Line {line} is out of range for '{self.name}' "
                f"({len(starts)} line(s))."
            )
        return starts[line]

    def insert_string(self, offset: int, text: str) -> None:
        if self.read_only:
            raise ReadOnlyDocumentError(self.name)
        if offset < 0 or offset > len(self._text):
            raise DocumentError(
                f"Offset {offset} is out of range for '{self.name}' "
                f"(length {len(self._text)})."
            )
        if not text:
            return
        self._text = self._text[:offset] + text + self._text[offset:]
        self._line_starts = None
        self._dirty = True

    def commit(self) -> None:
        self._dirty = False

    def _get_line_starts(self) -> List[int]:
        if self._line_starts is None:
            starts = [0]
            for index, char in enumerate(self._text):
                if char == LINE_SEPARATOR:
                    starts.append(index + 1)
            self._line_starts = starts
        return self._line_starts


class FileDocument(TextDocument):
    """
    A TextDocument loaded from disk. `commit()` flushes pending changes
    through a TransactionManager.
    """

    def __init__(
        self,
        path: Path,
        text: str,
        fs: Optional[FileSystemAdapter] = None,
        read_only: bool = False,
    ):
        super().__init__(text, name=path.name, read_only=read_only)
        self.path = path
        self.fs = fs or RealFileSystem()
        # Separator used on disk; the buffer itself always holds "\n".
        self.disk_separator = "\r\n" if "\r\n" in text else LINE_SEPARATOR

    @classmethod
    def load(
        cls,
        path: Path,
        fs: Optional[FileSystemAdapter] = None,
        read_only: bool = False,
    ) -> "FileDocument":
        fs = fs or RealFileSystem()
        text = fs.read_text(path) if fs.exists(path) else ""
        return cls(path, text, fs=fs, read_only=read_only)

    def commit(self) -> None:
        if not self.is_dirty:
            return
        tm = TransactionManager(self.path.parent, fs=self.fs)
        content = self.read_text()
        if self.disk_separator != LINE_SEPARATOR:
            content = content.replace(LINE_SEPARATOR, self.disk_separator)
        tm.add_write(self.path.name, content)
        log.debug(f"Flushing {self.path}: {tm.preview()}")
        tm.commit()
        super().commit()
