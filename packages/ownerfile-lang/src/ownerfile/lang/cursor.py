from typing import Optional


class LineCursor:
    def __init__(self, line: Optional[int] = None):
        self.line = line

    def primary_selection_start_line(self) -> Optional[int]:
        return self.line
