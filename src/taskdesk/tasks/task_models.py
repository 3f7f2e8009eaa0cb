# src/taskdesk/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)


class Priority(IntEnum):
    """
    Task priority.

    Only two levels exist: HIGH tasks are "urgent" and go to the urgent queue.
    """

    NORMAL = 0
    HIGH = 1

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        if isinstance(raw, Priority):
            return raw
        if isinstance(raw, bool):
            value = float(int(raw))
        else:
            try:
                value = float(str(raw).strip())
            except (TypeError, ValueError):
                return cls.NORMAL
        return cls.HIGH if value == cls.HIGH else cls.NORMAL


@dataclass(frozen=True, slots=True)
class Task:
    title: str
    description: str
    priority: Priority
    due_date: date | None
    category: str

    @property
    def is_urgent(self) -> bool:
        return self.priority == Priority.HIGH


def parse_due_date(raw: str | date | None) -> date | None:
    """Parse an ISO "YYYY-MM-DD" date. Malformed or empty input -> None."""
    if isinstance(raw, datetime):
        return raw.date()
    if raw is None or isinstance(raw, date):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable due date %r, leaving it unset", raw)
        return None


def build_task(
    *,
    title: str,
    description: str,
    priority: Any,
    due_date: str | date | None,
    category: str,
) -> Task:
    """Build a Task from raw form values (strings or numbers)."""
    return Task(
        title=str(title),
        description=str(description),
        priority=Priority.from_raw(priority),
        due_date=parse_due_date(due_date),
        category=str(category),
    )
