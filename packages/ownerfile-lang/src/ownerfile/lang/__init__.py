__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .constants import COMMENT_MARKER, LINE_SEPARATOR, is_comment_or_blank
from .document import TextDocument, FileDocument
from .walker import LineEntryWalker
from .cursor import LineCursor

__all__ = [
    "COMMENT_MARKER",
    "LINE_SEPARATOR",
    "is_comment_or_blank",
    "TextDocument",
    "FileDocument",
    "LineEntryWalker",
    "LineCursor",
]
