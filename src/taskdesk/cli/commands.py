# src/taskdesk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core import session
from ..core.state import SessionState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[SessionState, list[str]], str]
CommandHandler3 = Callable[[SessionState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /add title | description | priority (0/1) | due (YYYY-MM-DD) | category"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/add, /undo, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that get the rest of the line verbatim as a single argument.
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        state: SessionState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw:
            rest = line[1:].lstrip()[len(parts[0]) :].strip()
            args = [rest] if rest else []

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _render_tasks(state: SessionState) -> str:
    tasks = session.view(state).tasks
    if not tasks:
        return "No tasks."
    return "\n".join(session.format_task_line(t) for t in tasks)


def _render_urgent(state: SessionState) -> str:
    urgent = session.view(state).urgent
    if not urgent:
        return "No urgent tasks."
    return "\n".join(session.format_urgent_lines(urgent))


def cmd_help(state: SessionState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: SessionState, args: list[str]) -> str:
    deep = "ON" if getattr(state.settings, "deep_tree_removal", False) else "OFF"
    return (
        "Status:\n"
        f"  Tasks: {len(state.tasks)}\n"
        f"  Urgent: {len(state.urgent)}\n"
        f"  Undo available: {'yes' if state.history.can_undo else 'no'}\n"
        f"  Redo available: {'yes' if state.history.can_redo else 'no'}\n"
        f"  Deep tree removal: {deep}"
    )


def cmd_add(state: SessionState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add title | description | priority | due | category

    Fields are separated by "|"; description and due date may be left empty.
    """
    fields = [f.strip() for f in " ".join(args).split("|")]
    if len(fields) != 5:
        return ADD_USAGE
    title, description, priority, due, category = fields
    if not title or not category:
        return "Title and category are required.\n" + ADD_USAGE

    task = session.submit_task(
        state,
        title=title,
        description=description,
        priority=priority,
        due_date=due,
        category=category,
    )
    if emit is not None and state.tree.find_category_node(task.category) is None:
        emit(f"Category {task.category!r} does not exist; task not filed in the tree.")
    return f'Task "{task.title}" added.\n' + _render_tasks(state)


def cmd_undo(state: SessionState, args: list[str]) -> str:
    action = session.undo(state)
    if action is None:
        return "Nothing to undo."
    return f'Undid {action.kind} of "{action.task.title}".'


def cmd_redo(state: SessionState, args: list[str]) -> str:
    action = session.redo(state)
    if action is None:
        return "Nothing to redo."
    return f'Redid {action.kind} of "{action.task.title}".'


def cmd_list(state: SessionState, args: list[str]) -> str:
    return _render_tasks(state)


def cmd_urgent(state: SessionState, args: list[str]) -> str:
    return _render_urgent(state)


def cmd_tree(state: SessionState, args: list[str]) -> str:
    return session.view(state).tree_text.rstrip("\n")


def cmd_category(state: SessionState, args: list[str]) -> str:
    """
    /category Name          -> top-level category
    /category Parent/Child  -> subcategory under the first "Parent" found
    """
    raw = " ".join(args).strip()
    if not raw:
        return "Usage: /category Name | /category Parent/Child"

    parent, sep, child = raw.rpartition("/")
    if not sep:
        session.add_category(state, raw)
        return f'Category "{raw}" added.'

    parent, child = parent.strip(), child.strip()
    if not parent or not child:
        return "Usage: /category Name | /category Parent/Child"
    node = session.add_category(state, child, parent=parent)
    if node is None:
        return f'Category "{parent}" not found.'
    return f'Subcategory "{child}" added under "{parent}".'


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show session counters.")
registry.register(
    "add", cmd_add, help_text="Add a task: /add title | description | priority | due | category.", raw=True
)
registry.register("undo", cmd_undo, help_text="Undo the last add.", aliases=["u"])
registry.register("redo", cmd_redo, help_text="Redo the last undone add.", aliases=["r"])
registry.register("list", cmd_list, help_text="Show tasks (priority, then due date).", aliases=["ls"])
registry.register("urgent", cmd_urgent, help_text="Show the urgent queue in arrival order.")
registry.register("tree", cmd_tree, help_text="Show the category tree.")
registry.register(
    "category", cmd_category, help_text="Add a category: /category Name | Parent/Child.", raw=True
)
