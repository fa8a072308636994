import json
from pathlib import Path

import pytest

from ownerfile.needle import Needle, L


def test_needle_multi_root_loading_and_override(tmp_path: Path):
    # Root 1: packaged assets
    pkg_asset_root = tmp_path / "pkg" / "assets"
    (pkg_asset_root / "needle" / "en" / "cli").mkdir(parents=True)
    (pkg_asset_root / "needle" / "en" / "cli" / "main.json").write_text(
        json.dumps(
            {"cli.default": "I am a default", "cli.override_me": "Default Value"}
        )
    )

    # Root 2: a user's project with overrides
    project_root = tmp_path / "my_project"
    project_root.mkdir()
    (project_root / "pyproject.toml").touch()

    user_override_dir = project_root / ".ownerfile" / "needle" / "en"
    user_override_dir.mkdir(parents=True)
    (user_override_dir / "overrides.json").write_text(
        json.dumps(
            {"cli.override_me": "User Override!", "cli.user_only": "I am from the user"}
        )
    )

    rt = Needle(roots=[project_root])
    rt.add_root(pkg_asset_root)  # prepends: [pkg_asset_root, project_root]

    assert rt.get(L.cli.default) == "I am a default"
    assert rt.get(L.cli.user_only) == "I am from the user"
    assert rt.get(L.cli.override_me) == "User Override!"
    assert rt.get(L.unknown.key) == "unknown.key"


def test_needle_falls_back_to_default_language(tmp_path: Path, monkeypatch):
    (tmp_path / "needle" / "en").mkdir(parents=True)
    (tmp_path / "needle" / "en" / "msg.json").write_text(
        json.dumps({"greeting": "Hello"})
    )
    (tmp_path / "needle" / "de").mkdir(parents=True)
    (tmp_path / "needle" / "de" / "msg.json").write_text(
        json.dumps({"farewell": "Tschuess"})
    )
    monkeypatch.setenv("OWNERFILE_LANG", "de")

    rt = Needle(roots=[tmp_path])

    assert rt.get(L.farewell) == "Tschuess"
    assert rt.get(L.greeting) == "Hello"
    assert rt.get(L.greeting, lang="en") == "Hello"


def test_needle_skips_malformed_catalog(tmp_path: Path):
    catalog_dir = tmp_path / "needle" / "en"
    catalog_dir.mkdir(parents=True)
    (catalog_dir / "a_good.json").write_text(json.dumps({"ok": "fine"}))
    (catalog_dir / "b_bad.json").write_text("{ not json")

    rt = Needle(roots=[tmp_path])

    assert rt.get(L.ok) == "fine"
    assert rt.get(L.broken) == "broken"


def test_pointer_equality_and_str():
    assert str(L.append.entry_exists) == "append.entry_exists"
    assert L.append.entry_exists == "append.entry_exists"
    assert L.a.b == L.a.b
    assert len({L.a.b, L.a.b}) == 1


def test_pointer_joins_dynamic_segments():
    level = "warning"

    assert str(L.cli.level / level) == "cli.level.warning"
    assert L.cli / "level.warning" == L.cli.level.warning
    assert (L.cli.level / level).parts == ("cli", "level", "warning")
    assert (L.cli.level / level).parent == L.cli.level


def test_pointer_is_immutable():
    pointer = L.append.entry_exists

    with pytest.raises(AttributeError):
        pointer.extra = "x"
