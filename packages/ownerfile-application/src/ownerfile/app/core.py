import logging
from pathlib import Path
from typing import Iterable, Optional

from ownerfile.common import bus, FileSystemAdapter, RealFileSystem
from ownerfile.config import OwnerfileConfig, load_config_from_path
from ownerfile.lang import FileDocument, LineCursor, LineEntryWalker
from ownerfile.needle import L, find_project_root
from ownerfile.domain import MergePolicy, MergeResult
from .services import (
    BusNotifier,
    DirectoryFileResolver,
    EntryMerger,
    RulesFileMaterializer,
)

log = logging.getLogger(__name__)


class OwnerfileApp:
    def __init__(
        self,
        root_path: Path,
        config: Optional[OwnerfileConfig] = None,
        fs: Optional[FileSystemAdapter] = None,
    ):
        self.root_path = root_path
        self.config = config if config is not None else load_config_from_path(root_path)
        self.fs = fs or RealFileSystem()
        self.merger = EntryMerger(BusNotifier())
        self.materializer = RulesFileMaterializer(self.config.filename)
        bus.debug(L.debug.log.config_loaded, config=self.config)

    def run_create(self, directory: Optional[Path] = None) -> Path:
        resolver = DirectoryFileResolver(directory or self.root_path, fs=self.fs)
        path, _ = self.materializer.materialize(resolver)
        return path

    def run_append(
        self,
        entries: Iterable[str],
        target: Optional[Path] = None,
        directory: Optional[Path] = None,
        cursor_line: Optional[int] = None,
        insert_at_cursor: Optional[bool] = None,
        ignore_duplicates: Optional[bool] = None,
        ignore_comments: Optional[bool] = None,
    ) -> MergeResult:
        candidates = list(entries)

        if not candidates:
            path = target if target is not None else self._find_rules_file(directory)
            bus.info(L.append.no_entries, path=self._location(path))
            return MergeResult(path=path)

        path = target if target is not None else self.run_create(directory)

        policy = self._build_policy(
            insert_at_cursor=insert_at_cursor,
            ignore_duplicates=ignore_duplicates,
            ignore_comments=ignore_comments,
        )
        if policy.insert_at_cursor and cursor_line is None:
            bus.debug(L.append.cursor_fallback, path=self._location(path))

        document = FileDocument.load(path, fs=self.fs)
        result = self.merger.merge(
            document,
            LineEntryWalker(document),
            candidates,
            policy,
            cursor=LineCursor(cursor_line),
            location=self._location(path),
        )
        result.path = path

        if result.changed:
            bus.success(
                L.append.success, count=result.inserted_count, path=self._location(path)
            )
        else:
            bus.info(L.append.nothing, path=self._location(path))
        return result

    def _find_rules_file(self, directory: Optional[Path]) -> Path:
        base = directory or self.root_path
        resolver = DirectoryFileResolver(base, fs=self.fs)
        return resolver.find_file(self.config.filename) or base / self.config.filename

    def _build_policy(
        self,
        insert_at_cursor: Optional[bool],
        ignore_duplicates: Optional[bool],
        ignore_comments: Optional[bool],
    ) -> MergePolicy:
        defaults = self.config.to_policy()
        return MergePolicy(
            insert_at_cursor=(
                defaults.insert_at_cursor if insert_at_cursor is None else insert_at_cursor
            ),
            ignore_duplicates=(
                defaults.ignore_duplicates
                if ignore_duplicates is None
                else ignore_duplicates
            ),
            ignore_comments=(
                defaults.ignore_comments if ignore_comments is None else ignore_comments
            ),
        )

    def _location(self, path: Path) -> str:
        root = find_project_root(path.parent)
        if root is None:
            return path.name
        try:
            return path.resolve().relative_to(root).as_posix()
        except ValueError:
            log.debug(f"{path} is outside of project root {root}")
            return path.name
