"""taskdesk: a single-session task organizer (sorted list, urgent queue, category tree, undo/redo)."""

__version__ = "0.1.0"
