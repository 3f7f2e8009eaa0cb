# src/taskdesk/tasks/urgent_queue.py

from __future__ import annotations

import logging
from collections import deque

from .task_models import Task

logger = logging.getLogger(__name__)


class UrgentQueue:
    """FIFO of references to high-priority tasks."""

    def __init__(self) -> None:
        self._items: deque[Task] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, task: Task) -> None:
        self._items.append(task)

    def dequeue(self) -> Task | None:
        if not self._items:
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def discard(self, task: Task) -> bool:
        """Drop the first entry that is this exact instance."""
        for idx, item in enumerate(self._items):
            if item is task:
                del self._items[idx]
                logger.debug("Urgent queue discard title=%r", task.title)
                return True
        return False

    def snapshot(self) -> list[Task]:
        """
        Inspect the queue without losing or reordering entries.

        Drains into a temporary queue, then restores the original from it.
        """
        seen: list[Task] = []
        tmp = UrgentQueue()
        while not self.is_empty():
            task = self.dequeue()
            if task is None:
                break
            seen.append(task)
            tmp.enqueue(task)
        while not tmp.is_empty():
            task = tmp.dequeue()
            if task is not None:
                self.enqueue(task)
        return seen
