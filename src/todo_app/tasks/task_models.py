# src/todo_app/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

TASK_ID_LENGTH = 8


class TaskPriority(IntEnum):
    """
    Task priority.

    Notes:
    - Ordering is the numeric value: HIGH < MEDIUM < LOW.
    - The value is also the digit written to the tasks file.
    - Display labels live in cli/render.py, not here.
    """

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def token(self) -> str:
        return str(self.value)

    @classmethod
    def from_token(cls, raw: str | None) -> TaskPriority:
        """Lenient lookup: anything other than "1"/"2"/"3" becomes MEDIUM."""
        if not raw:
            return cls.MEDIUM
        for priority in cls:
            if priority.token == raw.strip():
                return priority
        return cls.MEDIUM


def new_task_id() -> str:
    return uuid.uuid4().hex[:TASK_ID_LENGTH]


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    description: str
    deadline: date | None
    priority: TaskPriority
    completed: bool = False
