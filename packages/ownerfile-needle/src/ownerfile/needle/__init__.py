__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .pointer import L, SemanticPointer
from .runtime import needle, Needle, find_project_root
from .loader import Loader
from .interfaces import FileHandler

__all__ = [
    "L",
    "SemanticPointer",
    "needle",
    "Needle",
    "Loader",
    "FileHandler",
    "find_project_root",
]
