from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class MergePolicy:
    insert_at_cursor: bool = False
    ignore_duplicates: bool = False  # drop lines already present in the file
    ignore_comments: bool = False  # strip comment and blank lines


@dataclass
class MergeResult:
    path: Optional[Path] = None
    start_offset: int = 0
    inserted: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)

    @property
    def inserted_count(self) -> int:
        return len(self.inserted)

    @property
    def inserted_length(self) -> int:
        return sum(len(text) for text in self.inserted)

    @property
    def changed(self) -> bool:
        return self.inserted_length > 0
