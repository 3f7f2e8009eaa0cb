# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDESK_DATA_DIR": "Local directory for taskdesk.log (default: .local/taskdesk).",
    # Category tree
    "TASKDESK_ROOT_NAME": "Name of the tree root node (default: Tasks).",
    "TASKDESK_DEFAULT_CATEGORIES": (
        "Comma/space separated top-level categories created at start (default: Work Personal Studies)."
    ),
    "TASKDESK_TREE_INDENT": "Spaces per tree level in /tree output (default: 4).",
    "TASKDESK_TREE_MARKER": "Prefix printed before each task in /tree output (default: '- ').",
    "TASKDESK_DEEP_TREE_REMOVAL": (
        "Undo removes the task from every matching category node, not only the root's children (true/false)."
    ),
}
