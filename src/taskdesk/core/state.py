# src/taskdesk/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..tasks.category_tree import CategoryTree
from ..tasks.history import ActionHistory
from ..tasks.task_list import TaskList
from ..tasks.urgent_queue import UrgentQueue

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """
    Everything one task-organizing session owns.

    The task list, tree, urgent queue and history all reference the same
    Task instances. A session lives until the process exits; no teardown.
    """

    # Settings-like object (taskdesk.config.Settings or a test namespace).
    settings: Any

    tasks: TaskList = field(default_factory=TaskList)
    urgent: UrgentQueue = field(default_factory=UrgentQueue)
    tree: CategoryTree = field(default_factory=CategoryTree)
    history: ActionHistory = field(default_factory=ActionHistory)


def create_session(settings: Any) -> SessionState:
    """Build a fresh session and seed the default top-level categories."""
    tree = CategoryTree(
        getattr(settings, "root_name", "Tasks"),
        indent=int(getattr(settings, "tree_indent", 4)),
        marker=str(getattr(settings, "tree_marker", "- ")),
    )
    for name in getattr(settings, "default_categories", None) or []:
        tree.add_category(name)

    state = SessionState(settings=settings, tree=tree)
    logger.info("Session ready categories=%s", tree.categories())
    return state
