__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .loader import (
    OwnerfileConfig,
    ConfigError,
    DEFAULT_FILENAME,
    load_config_from_path,
)

__all__ = [
    "OwnerfileConfig",
    "ConfigError",
    "DEFAULT_FILENAME",
    "load_config_from_path",
]
