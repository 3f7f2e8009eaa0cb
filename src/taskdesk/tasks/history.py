# src/taskdesk/tasks/history.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from .task_models import Task

logger = logging.getLogger(__name__)


class ActionKind(StrEnum):
    ADD = "add"


@dataclass(frozen=True, slots=True)
class AddAction:
    task: Task
    kind: ClassVar[ActionKind] = ActionKind.ADD


# Tagged union of reversible actions. New kinds (remove, modify) get their
# own dataclass with a distinct `kind` and join this alias.
Action = AddAction


class ActionHistory:
    """Undo/redo stacks. Recording a new action discards anything redoable."""

    def __init__(self) -> None:
        self._undo: list[Action] = []
        self._redo: list[Action] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self, action: Action) -> None:
        self._undo.append(action)
        self._redo.clear()
        logger.debug("Recorded %s title=%r depth=%d", action.kind, action.task.title, len(self._undo))

    def undo(self) -> Action | None:
        if not self._undo:
            return None
        action = self._undo.pop()
        self._redo.append(action)
        return action

    def redo(self) -> Action | None:
        if not self._redo:
            return None
        action = self._redo.pop()
        self._undo.append(action)
        return action

    def undo_stack(self) -> list[Action]:
        return list(self._undo)

    def redo_stack(self) -> list[Action]:
        return list(self._redo)
