import pytest
from ownerfile.test_utils.workspace import WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # A clean, git-rooted workspace per test, with cwd inside it.
    factory = WorkspaceFactory(tmp_path).init_git()
    monkeypatch.chdir(tmp_path)
    return factory
