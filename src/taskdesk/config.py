# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDESK"

DEFAULT_CATEGORIES = ["Work", "Personal", "Studies"]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Category tree ----
    root_name: str
    default_categories: list[str]
    tree_indent: int
    tree_marker: str

    # Undo cleans the whole tree instead of only the root's direct children.
    deep_tree_removal: bool

    @staticmethod
    def from_env(*, dotenv: bool = True) -> Settings:
        if dotenv:
            load_dotenv(override=False)

        tree_indent = _env_int(_k("TREE_INDENT"), 4)
        if tree_indent < 0:
            tree_indent = 4

        return Settings(
            app_name=_env(_k("APP_NAME"), "taskdesk") or "taskdesk",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskdesk")),
            root_name=_env(_k("ROOT_NAME"), "Tasks") or "Tasks",
            default_categories=_env_list(_k("DEFAULT_CATEGORIES"), DEFAULT_CATEGORIES),
            tree_indent=tree_indent,
            tree_marker=_env(_k("TREE_MARKER"), "- "),
            deep_tree_removal=_env_bool(_k("DEEP_TREE_REMOVAL"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
