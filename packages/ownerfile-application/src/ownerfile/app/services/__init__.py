from .merger import EntryMerger
from .notifier import BusNotifier
from .file_resolver import DirectoryFileResolver
from .materializer import RulesFileMaterializer

__all__ = [
    "EntryMerger",
    "BusNotifier",
    "DirectoryFileResolver",
    "RulesFileMaterializer",
]
