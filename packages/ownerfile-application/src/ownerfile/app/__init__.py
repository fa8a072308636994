__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .core import OwnerfileApp

__all__ = ["OwnerfileApp"]
