import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ownerfile.domain import MergePolicy

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

DEFAULT_FILENAME = "CODEOWNERS"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class OwnerfileConfig:
    insert_at_cursor: bool = False
    ignore_duplicates: bool = False
    ignore_comments: bool = False
    filename: str = DEFAULT_FILENAME
    source: Optional[Path] = None

    def to_policy(self) -> MergePolicy:
        return MergePolicy(
            insert_at_cursor=self.insert_at_cursor,
            ignore_duplicates=self.ignore_duplicates,
            ignore_comments=self.ignore_comments,
        )


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _read_bool(data: Dict[str, Any], key: str, config_path: Path) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(
            f"[tool.ownerfile] {key} in {config_path} must be a boolean, "
            f"got {value!r}"
        )
    return value


def load_config_from_path(search_path: Path) -> OwnerfileConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return OwnerfileConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    ownerfile_data: Dict[str, Any] = data.get("tool", {}).get("ownerfile", {})

    filename = ownerfile_data.get("filename", DEFAULT_FILENAME)
    if not isinstance(filename, str) or not filename.strip():
        raise ConfigError(
            f"[tool.ownerfile] filename in {config_path} must be a non-empty string"
        )

    return OwnerfileConfig(
        insert_at_cursor=_read_bool(ownerfile_data, "insert_at_cursor", config_path),
        ignore_duplicates=_read_bool(ownerfile_data, "ignore_duplicates", config_path),
        ignore_comments=_read_bool(ownerfile_data, "ignore_comments", config_path),
        filename=filename,
        source=config_path,
    )
