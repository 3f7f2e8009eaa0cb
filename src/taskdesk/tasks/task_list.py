# src/taskdesk/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date

from .task_models import Task

logger = logging.getLogger(__name__)


def sort_key(task: Task) -> tuple[int, bool, date]:
    # Higher priority first, then earliest due date; undated tasks go last.
    return (-int(task.priority), task.due_date is None, task.due_date or date.min)


class TaskList:
    """
    Ordered task collection.

    Tasks are kept sorted by (priority desc, due date asc) after every insert
    or modification. Titles act as lookup keys but are not enforced unique.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def _sort(self) -> None:
        self._tasks.sort(key=sort_key)

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        self._sort()
        logger.debug("Task added title=%r total=%d", task.title, len(self._tasks))

    def remove(self, title: str) -> int:
        """Remove every task with this title. Returns how many were removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.title != title]
        removed = before - len(self._tasks)
        logger.debug("Task remove title=%r removed=%d", title, removed)
        return removed

    def modify(self, title: str, new_task: Task) -> bool:
        for idx, task in enumerate(self._tasks):
            if task.title == title:
                self._tasks[idx] = new_task
                self._sort()
                logger.debug("Task modified title=%r -> %r", title, new_task.title)
                return True
        logger.debug("Task modify skipped, title=%r not found", title)
        return False

    def find(self, title: str) -> Task | None:
        for task in self._tasks:
            if task.title == title:
                return task
        return None

    def list(self) -> list[Task]:
        return list(self._tasks)
