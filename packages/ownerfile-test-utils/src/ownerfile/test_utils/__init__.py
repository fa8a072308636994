from .bus import SpyBus
from .needle import MockNeedle
from .workspace import WorkspaceFactory
from .doubles import RecordingNotifier, StaticEntryWalker

__all__ = [
    "SpyBus",
    "MockNeedle",
    "WorkspaceFactory",
    "RecordingNotifier",
    "StaticEntryWalker",
]
