from pathlib import Path

from ownerfile.app import OwnerfileApp
from ownerfile.config import load_config_from_path
from ownerfile.needle import find_project_root


def get_project_root() -> Path:
    return find_project_root() or Path.cwd()


def make_app() -> OwnerfileApp:
    root_path = get_project_root()
    return OwnerfileApp(root_path=root_path, config=load_config_from_path(root_path))
