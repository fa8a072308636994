from typing import Callable, List, Tuple


class RecordingNotifier:
    def __init__(self):
        self.warnings: List[Tuple[str, str]] = []

    def warn(self, title: str, detail: str) -> None:
        self.warnings.append((title, detail))


class StaticEntryWalker:
    """Reports a fixed list of entries, independent of any document."""

    def __init__(self, entries: List[str]):
        self.entries = entries

    def for_each_top_level_entry(self, callback: Callable[[str], None]) -> None:
        for entry in self.entries:
            callback(entry)
