from pathlib import Path
from textwrap import dedent
from typing import Dict, Any, List

import tomli_w


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, ownerfile_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["ownerfile"] = ownerfile_config
        return self

    def with_project_name(self, name: str) -> "WorkspaceFactory":
        project = self._pyproject_data.setdefault("project", {})
        project["name"] = name
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_codeowners(
        self, content: str, path: str = "CODEOWNERS"
    ) -> "WorkspaceFactory":
        # Written verbatim: tests depend on exact trailing newlines.
        self._files_to_create.append(
            {"path": path, "content": content, "format": "raw"}
        )
        return self

    def init_git(self) -> "WorkspaceFactory":
        (self.root_path / ".git").mkdir(parents=True, exist_ok=True)
        return self

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            if file_spec["format"] == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(file_spec["content"], f)
            else:
                with output_path.open("w", encoding="utf-8", newline="") as f:
                    f.write(file_spec["content"])

        return self.root_path
