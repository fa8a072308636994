from pathlib import Path
from typing import Tuple

from ownerfile.common import bus
from ownerfile.needle import L
from ownerfile.domain import FileResolver


class RulesFileMaterializer:
    """Locates the canonical rules file in a directory, creating it if missing."""

    def __init__(self, filename: str):
        self.filename = filename

    def materialize(self, resolver: FileResolver) -> Tuple[Path, bool]:
        existing = resolver.find_file(self.filename)
        if existing is not None:
            bus.debug(L.create.exists, path=existing)
            return existing, False

        created = resolver.create_file(self.filename, "")
        bus.info(L.create.created, path=created)
        return created, True
