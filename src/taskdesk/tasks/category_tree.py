# src/taskdesk/tasks/category_tree.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "Tasks"


@dataclass(slots=True, eq=False)
class CategoryNode:
    """
    A named grouping point.

    Children are owned by the node; tasks are shared references
    (the same instances live in the task list).
    """

    name: str
    children: list[CategoryNode] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)

    def add_child(self, child: CategoryNode) -> None:
        self.children.append(child)

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def drop_tasks(self, title: str) -> int:
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.title != title]
        return before - len(self.tasks)


class CategoryTree:
    """
    Category / subcategory tree rooted at a fixed sentinel node.

    Sibling names are expected to be unique but this is not enforced;
    lookups return the first depth-first (pre-order) match.
    """

    def __init__(
        self,
        root_name: str = DEFAULT_ROOT_NAME,
        *,
        indent: int = 4,
        marker: str = "- ",
    ) -> None:
        self.root = CategoryNode(root_name)
        self.indent = indent
        self.marker = marker

    def add_category(self, name: str) -> CategoryNode:
        return self.add_sub_category(self.root, name)

    def add_sub_category(self, parent: CategoryNode, name: str) -> CategoryNode:
        node = CategoryNode(name)
        parent.add_child(node)
        logger.debug("Category added name=%r parent=%r", name, parent.name)
        return node

    def add_task_to_category(self, name: str, task: Task) -> bool:
        node = self.find_category_node(name)
        if node is None:
            logger.debug("No category %r for task %r", name, task.title)
            return False
        node.add_task(task)
        return True

    def find_category_node(self, name: str, node: CategoryNode | None = None) -> CategoryNode | None:
        if node is None:
            node = self.root
        if node.name == name:
            return node
        for child in node.children:
            found = self.find_category_node(name, child)
            if found is not None:
                return found
        return None

    def remove_task_from_tree(self, task: Task, node: CategoryNode, *, deep: bool = False) -> int:
        """
        Remove tasks titled like `task` from its category under `node`.

        Default scan looks only at the direct children of `node` and stops at
        the first child named `task.category`; `node` itself and deeper
        descendants are not touched. With deep=True every node below (and
        including) `node` named `task.category` is cleaned.
        """
        if deep:
            removed = self._remove_deep(task, node)
        else:
            removed = 0
            for child in node.children:
                if child.name == task.category:
                    removed = child.drop_tasks(task.title)
                    break
        logger.debug(
            "Tree removal title=%r category=%r deep=%s removed=%d",
            task.title,
            task.category,
            deep,
            removed,
        )
        return removed

    def _remove_deep(self, task: Task, node: CategoryNode) -> int:
        removed = node.drop_tasks(task.title) if node.name == task.category else 0
        for child in node.children:
            removed += self._remove_deep(task, child)
        return removed

    def categories(self) -> list[str]:
        out: list[str] = []

        def walk(node: CategoryNode) -> None:
            for child in node.children:
                out.append(child.name)
                walk(child)

        walk(self.root)
        return out

    def render(self, node: CategoryNode | None = None, level: int = 0) -> str:
        if node is None:
            node = self.root
        pad = " " * (level * self.indent)
        task_pad = " " * ((level + 1) * self.indent)
        lines = [f"{pad}{node.name}\n"]
        lines.extend(f"{task_pad}{self.marker}{t.title}\n" for t in node.tasks)
        lines.extend(self.render(child, level + 1) for child in node.children)
        return "".join(lines)
