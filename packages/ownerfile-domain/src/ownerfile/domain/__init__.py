# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .models import MergePolicy, MergeResult
from .protocols import (
    DocumentView,
    CursorProvider,
    EntryWalker,
    Notifier,
    FileResolver,
)
from .exceptions import DocumentError, ReadOnlyDocumentError

__all__ = [
    "MergePolicy",
    "MergeResult",
    "DocumentView",
    "CursorProvider",
    "EntryWalker",
    "Notifier",
    "FileResolver",
    "DocumentError",
    "ReadOnlyDocumentError",
]
