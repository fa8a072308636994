from typing import Callable

from ownerfile.domain import DocumentView
from .constants import LINE_SEPARATOR, is_comment_or_blank


class LineEntryWalker:
    """
    Enumerates top-level entries of a rules document, one per rule line.

    Each rule line is reported verbatim, without its line separator, so that
    duplicate detection stays an exact-string match. Comment and blank lines
    are skipped.
    """

    def __init__(self, document: DocumentView):
        self.document = document

    def for_each_top_level_entry(self, callback: Callable[[str], None]) -> None:
        # Snapshot first: the callback must not observe its own inserts.
        lines = self.document.read_text().split(LINE_SEPARATOR)
        for line in lines:
            if is_comment_or_blank(line):
                continue
            callback(line)
