from pathlib import Path
from typing import Callable, Optional, Protocol


class DocumentView(Protocol):
    """
    A mutable text buffer holding the rules file.

    Offsets are character offsets into `read_text()`. Line numbers are 0-based.
    """

    def read_text(self) -> str: ...

    def text_length(self) -> int: ...

    def insert_string(self, offset: int, text: str) -> None: ...

    def line_start_offset(self, line: int) -> int: ...

    def ends_with_separator(self) -> bool: ...

    def commit(self) -> None: ...


class CursorProvider(Protocol):
    def primary_selection_start_line(self) -> Optional[int]: ...


class EntryWalker(Protocol):
    def for_each_top_level_entry(self, callback: Callable[[str], None]) -> None: ...


class Notifier(Protocol):
    def warn(self, title: str, detail: str) -> None: ...


class FileResolver(Protocol):
    def find_file(self, name: str) -> Optional[Path]: ...

    def create_file(self, name: str, content: str) -> Path: ...
