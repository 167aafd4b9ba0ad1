# src/todo_app/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskManager


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    tasks: TaskManager
    language: str = "en"
