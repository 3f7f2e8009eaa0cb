# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.config import Settings


def test_defaults_without_env(monkeypatch) -> None:
    for name in (
        "TASKDESK_APP_NAME",
        "TASKDESK_DATA_DIR",
        "TASKDESK_DEFAULT_CATEGORIES",
        "TASKDESK_TREE_INDENT",
        "TASKDESK_DEEP_TREE_REMOVAL",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env(dotenv=False)
    assert s.app_name == "taskdesk"
    assert s.data_dir == Path(".local/taskdesk")
    assert s.default_categories == ["Work", "Personal", "Studies"]
    assert s.tree_indent == 4
    assert s.deep_tree_removal is False


def test_env_overrides_and_bad_values(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDESK_DATA_DIR", str(tmp_path / "d"))
    monkeypatch.setenv("TASKDESK_DEFAULT_CATEGORIES", "Home, Garden")
    monkeypatch.setenv("TASKDESK_TREE_INDENT", "wide")
    monkeypatch.setenv("TASKDESK_DEEP_TREE_REMOVAL", "yes")
    monkeypatch.setenv("TASKDESK_ROOT_NAME", "All")

    s = Settings.from_env(dotenv=False)
    assert s.default_categories == ["Home", "Garden"]
    assert s.tree_indent == 4
    assert s.deep_tree_removal is True

    state = create_initial_state(settings=s)
    assert (tmp_path / "d").is_dir()
    assert state.tree.root.name == "All"
    assert state.tree.categories() == ["Home", "Garden"]
