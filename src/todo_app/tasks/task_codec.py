# src/todo_app/tasks/task_codec.py

"""
One-line text format for tasks:

    <'+'|'-'> <priority digit> <description>: <YYYY-MM-DD or empty>

e.g. "+ 1 Test: 2024-01-15" or "- 2 Buy milk: ".

The description is written verbatim. A description containing ": " will not
survive a reload (the first ": " is taken as the date separator).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from .task_models import Task, TaskPriority

STORAGE_DATE_FORMAT = "%Y-%m-%d"

COMPLETED_MARK = "+"
PENDING_MARK = "-"
DATE_SEPARATOR = ": "

_STORAGE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TaskDecodeError(ValueError):
    """A line from the tasks file could not be turned into a Task."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


def encode_task(task: Task) -> str:
    status = COMPLETED_MARK if task.completed else PENDING_MARK
    date_part = task.deadline.strftime(STORAGE_DATE_FORMAT) if task.deadline else ""
    return f"{status} {task.priority.token} {task.description}{DATE_SEPARATOR}{date_part}"


def decode_task(line: str, *, new_id: Callable[[], str]) -> Task:
    """
    Parse one stored line.

    Ids are not stored: new_id() is called for a fresh one, only once the line
    has parsed successfully.

    Raises TaskDecodeError on a bad structure or an invalid date.
    Unknown priority digits are not an error (see TaskPriority.from_token).
    """
    if not line.startswith((COMPLETED_MARK + " ", PENDING_MARK + " ")):
        raise TaskDecodeError(line, "missing status prefix")

    completed = line.startswith(COMPLETED_MARK)
    before, sep, date_str = line[2:].partition(DATE_SEPARATOR)
    if not sep:
        raise TaskDecodeError(line, "missing date separator")

    token, space, description = before.partition(" ")
    if not space:
        raise TaskDecodeError(line, "missing priority or description")

    deadline = None
    if date_str:
        if not _STORAGE_DATE_RE.match(date_str):
            raise TaskDecodeError(line, "bad date")
        try:
            deadline = datetime.strptime(date_str, STORAGE_DATE_FORMAT).date()
        except ValueError as e:
            raise TaskDecodeError(line, "bad date") from e

    return Task(
        id=new_id(),
        description=description,
        deadline=deadline,
        priority=TaskPriority.from_token(token),
        completed=completed,
    )
