__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from pathlib import Path

from ownerfile.needle import needle
from .messaging.bus import MessageBus
from .transaction import TransactionManager, FileSystemAdapter, RealFileSystem

# Packaged message catalogs sit underneath any project-level overrides.
needle.add_root(Path(__file__).parent / "assets")

bus = MessageBus()

__all__ = [
    "bus",
    "MessageBus",
    "TransactionManager",
    "FileSystemAdapter",
    "RealFileSystem",
]
