# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.core.state import SessionState, create_session
from taskdesk.tasks.task_models import Priority, Task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with SessionState and core modules.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        root_name="Tasks",
        default_categories=["Work", "Personal", "Studies"],
        tree_indent=4,
        tree_marker="- ",
        deep_tree_removal=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> SessionState:
    return create_session(settings)


@pytest.fixture()
def make_task():
    def _make(
        title: str,
        *,
        priority: int = 0,
        due: str | None = "2024-01-01",
        category: str = "Work",
        description: str = "",
    ) -> Task:
        return Task(
            title=title,
            description=description,
            priority=Priority(priority),
            due_date=date.fromisoformat(due) if due else None,
            category=category,
        )

    return _make
