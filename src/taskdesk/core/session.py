# src/taskdesk/core/session.py

"""
Session operations: the glue between user events and the task structures.

Each entry point corresponds to one UI event ("task submitted",
"undo requested", "redo requested") and runs to completion. `view()` is a
pure read used to redisplay after every mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..tasks.category_tree import CategoryNode
from ..tasks.history import Action, ActionKind, AddAction
from ..tasks.task_models import Priority, Task, build_task
from .state import SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionView:
    tasks: tuple[Task, ...]
    urgent: tuple[Task, ...]
    tree_text: str


def _deep_removal(state: SessionState) -> bool:
    return bool(getattr(state.settings, "deep_tree_removal", False))


def _apply_add(state: SessionState, task: Task) -> None:
    state.tasks.add(task)
    state.tree.add_task_to_category(task.category, task)
    if task.is_urgent:
        state.urgent.enqueue(task)


def _revert_add(state: SessionState, task: Task) -> None:
    state.tasks.remove(task.title)
    if task.is_urgent:
        state.urgent.discard(task)
    state.tree.remove_task_from_tree(task, state.tree.root, deep=_deep_removal(state))


def submit_task(
    state: SessionState,
    *,
    title: str,
    description: str,
    priority: Any,
    due_date: str | date | None,
    category: str,
) -> Task:
    """Handle a submitted task form: build, store, record, file and maybe queue it."""
    task = build_task(
        title=title,
        description=description,
        priority=priority,
        due_date=due_date,
        category=category,
    )
    state.history.record(AddAction(task))
    _apply_add(state, task)
    logger.info("Task submitted title=%r urgent=%s category=%r", task.title, task.is_urgent, task.category)
    return task


def undo(state: SessionState) -> Action | None:
    action = state.history.undo()
    if action is None:
        logger.debug("Nothing to undo")
        return None
    if action.kind == ActionKind.ADD:
        _revert_add(state, action.task)
    logger.info("Undone %s title=%r", action.kind, action.task.title)
    return action


def redo(state: SessionState) -> Action | None:
    action = state.history.redo()
    if action is None:
        logger.debug("Nothing to redo")
        return None
    if action.kind == ActionKind.ADD:
        _apply_add(state, action.task)
    logger.info("Redone %s title=%r", action.kind, action.task.title)
    return action


def add_category(state: SessionState, name: str, parent: str | None = None) -> CategoryNode | None:
    """Create a top-level category, or a subcategory under the first node named `parent`."""
    if parent is None:
        return state.tree.add_category(name)
    parent_node = state.tree.find_category_node(parent)
    if parent_node is None:
        logger.debug("Parent category %r not found for %r", parent, name)
        return None
    return state.tree.add_sub_category(parent_node, name)


def view(state: SessionState) -> SessionView:
    return SessionView(
        tasks=tuple(state.tasks.list()),
        urgent=tuple(state.urgent.snapshot()),
        tree_text=state.tree.render(),
    )


# ---- display helpers ----


def format_task_line(task: Task) -> str:
    priority_text = "High" if task.priority == Priority.HIGH else "Normal"
    due = task.due_date.isoformat() if task.due_date else "none"
    return f"{task.title} - {task.description} (Priority: {priority_text}, Due: {due})"


def format_urgent_lines(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}. {t.title} - {t.description}" for i, t in enumerate(tasks, start=1)]
