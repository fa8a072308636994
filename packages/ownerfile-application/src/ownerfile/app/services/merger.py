from typing import Iterable, List, Optional, Set, Tuple

from ownerfile.common import bus
from ownerfile.lang import LINE_SEPARATOR, is_comment_or_blank
from ownerfile.needle import L
from ownerfile.domain import (
    CursorProvider,
    DocumentView,
    EntryWalker,
    MergePolicy,
    MergeResult,
    Notifier,
)


class EntryMerger:
    """
    Appends candidate entries to a rules document.

    A merge runs in three stages:

    1. Candidates whose text equals an existing top-level entry are dropped
       and reported through the notifier.
    2. The insertion offset is resolved once: the cursor line start when
       `insert_at_cursor` is set and a cursor line is known, the end of the
       document otherwise.
    3. Each remaining candidate is filtered according to the policy and
       inserted; the offset advances past every inserted block.

    Existing text is never removed, so the document length never shrinks.
    """

    def __init__(self, notifier: Notifier, separator: str = LINE_SEPARATOR):
        self.notifier = notifier
        self.separator = separator

    def merge(
        self,
        document: DocumentView,
        walker: EntryWalker,
        candidates: Iterable[str],
        policy: MergePolicy,
        cursor: Optional[CursorProvider] = None,
        location: str = "",
    ) -> MergeResult:
        # Insertion-ordered set: duplicates collapse, order stays stable.
        pending = list(dict.fromkeys(candidates))
        result = MergeResult(start_offset=document.text_length())
        if not pending:
            return result

        result.duplicates = self._remove_existing(walker, pending, location)

        offset, at_cursor = self._resolve_offset(document, policy, cursor)
        result.start_offset = offset
        bus.debug(L.debug.log.merge_offset, path=location, offset=offset)

        for candidate in pending:
            entry = self._resolve_entry(candidate, document, policy, at_cursor)
            if not entry:
                continue
            document.insert_string(offset, entry)
            bus.debug(L.debug.log.entry_resolved, length=len(entry), offset=offset)
            offset += len(entry)
            result.inserted.append(entry)

        document.commit()
        return result

    def _remove_existing(
        self, walker: EntryWalker, pending: List[str], location: str
    ) -> List[str]:
        removed: List[str] = []

        def visit_entry(text: str) -> None:
            if text in pending:
                self.notifier.warn(
                    bus.render_to_string(L.append.entry_exists, entry=text),
                    bus.render_to_string(L.append.entry_exists_in, location=location),
                )
                pending.remove(text)
                removed.append(text)

        walker.for_each_top_level_entry(visit_entry)
        return removed

    def _resolve_offset(
        self,
        document: DocumentView,
        policy: MergePolicy,
        cursor: Optional[CursorProvider],
    ) -> Tuple[int, bool]:
        # The flag reports where the insert really goes, not the policy: a
        # cursor request without a usable line is an end-of-document insert
        # and gets the leading separator ("a" + "b" -> "a\nb\n", never "ab\n").
        end = document.text_length()
        if not policy.insert_at_cursor or cursor is None:
            return end, False

        line = cursor.primary_selection_start_line()
        if line is None or line < 0:
            return end, False

        if line >= self._line_count(document):
            return end, False
        return document.line_start_offset(line), True

    def _line_count(self, document: DocumentView) -> int:
        return document.read_text().count(self.separator) + 1

    def _resolve_entry(
        self,
        candidate: str,
        document: DocumentView,
        policy: MergePolicy,
        at_cursor: bool,
    ) -> str:
        entry = candidate
        if policy.ignore_duplicates:
            entry = self._drop_duplicate_lines(entry, document.read_text())
        if policy.ignore_comments:
            entry = self._strip_comments(entry)

        entry = entry.replace("\r", "")
        if entry:
            entry += self.separator

        if (
            entry
            and not at_cursor
            and document.text_length() > 0
            and not document.ends_with_separator()
        ):
            entry = self.separator + entry
        return entry

    def _drop_duplicate_lines(self, entry: str, current_text: str) -> str:
        seen: Set[str] = {
            line.strip()
            for line in current_text.split(self.separator)
            if not is_comment_or_blank(line)
        }
        kept: List[str] = []
        for line in entry.split(self.separator):
            trimmed = line.strip()
            # Comments and blank lines are never treated as duplicates.
            if is_comment_or_blank(trimmed):
                kept.append(line)
                continue
            if trimmed in seen:
                continue
            seen.add(trimmed)
            kept.append(line)
        return self.separator.join(kept)

    def _strip_comments(self, entry: str) -> str:
        lines = entry.split(self.separator)
        return self.separator.join(
            line for line in lines if not is_comment_or_blank(line)
        )
