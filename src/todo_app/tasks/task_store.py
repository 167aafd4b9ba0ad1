# src/todo_app/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any

from ..core.ports import IdGenerator, TaskSink
from .task_codec import TaskDecodeError, decode_task, encode_task
from .task_file import TaskFile
from .task_models import Task, TaskPriority, new_task_id

logger = logging.getLogger(__name__)

# "Leave this field alone" marker for update(); None can be a real value (deadline).
UNSET: Any = object()


class TaskManager:
    """
    In-memory ordered task list mirrored to a TaskSink.

    The list order is meaningful: it is the current sort order and is written
    verbatim. Every mutation (add/update/remove/sort) rewrites the whole sink.

    Ids are generated per session: the file does not store them, so each load
    assigns fresh ones.

    Persistence errors are logged and swallowed; the in-memory list stays
    the source of truth for the rest of the session.
    """

    def __init__(
        self,
        sink: TaskSink | str | Path,
        *,
        id_factory: IdGenerator = new_task_id,
    ) -> None:
        if isinstance(sink, (str, Path)):
            sink = TaskFile(sink)
        self._sink: TaskSink = sink
        self._new_id = id_factory
        self._tasks: list[Task] = []
        self._load()

    # ---- low-level helpers ----

    def _load(self) -> None:
        try:
            lines = self._sink.read_lines()
        except (OSError, UnicodeError):
            logger.exception("Failed to read tasks from %s", self._sink)
            return
        if lines is None:
            return

        skipped = 0
        for line_no, line in enumerate(lines, start=1):
            try:
                task = decode_task(line, new_id=self._unique_id)
            except TaskDecodeError as e:
                skipped += 1
                logger.warning("Skipping line %d of %s: %s", line_no, self._sink, e)
                continue
            self._tasks.append(task)

        logger.info(
            "Tasks loaded from %s: total=%d skipped=%d", self._sink, len(self._tasks), skipped
        )

    def _unique_id(self) -> str:
        while True:
            candidate = self._new_id()
            if self._index_of(candidate) is None:
                return candidate
            logger.debug("Task id collision on %s, regenerating.", candidate)

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _save(self) -> None:
        try:
            self._sink.write_lines([encode_task(t) for t in self._tasks])
        except (OSError, UnicodeError):
            logger.exception("Failed to save tasks to %s", self._sink)

    @staticmethod
    def _deadline_key(task: Task) -> tuple[bool, bool, date]:
        return (task.completed, task.deadline is None, task.deadline or date.min)

    @staticmethod
    def _priority_key(task: Task) -> tuple[bool, TaskPriority]:
        return (task.completed, task.priority)

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def add(
        self,
        description: str,
        deadline: date | None = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> str:
        task_id = self._unique_id()
        self._tasks.append(
            Task(
                id=task_id,
                description=description,
                deadline=deadline,
                priority=priority,
                completed=False,
            )
        )
        logger.info("Task added id=%s priority=%s deadline=%s", task_id, priority.name, deadline)
        self._save()
        return task_id

    def update(
        self,
        task_id: str,
        *,
        description: str | None = UNSET,
        deadline: date | None = UNSET,
        priority: TaskPriority | None = UNSET,
        completed: bool | None = UNSET,
    ) -> bool:
        """
        Overwrite the given fields of a task; omitted fields are kept.

        - description: None, "" or whitespace keep the old text (it cannot be blanked).
        - deadline: None clears the deadline.
        - priority / completed: None keeps the old value.

        Returns False if no task has this id.
        """
        idx = self._index_of(task_id)
        if idx is None:
            logger.info("Update skipped: task id=%s not found", task_id)
            return False

        task = self._tasks[idx]
        changes: dict[str, Any] = {}

        if description is not UNSET and description is not None and description.strip():
            changes["description"] = description.strip()
        if deadline is not UNSET:
            changes["deadline"] = deadline
        if priority is not UNSET and priority is not None:
            changes["priority"] = priority
        if completed is not UNSET and completed is not None:
            changes["completed"] = bool(completed)

        self._tasks[idx] = replace(task, **changes)
        logger.info("Task updated id=%s fields=%s", task_id, sorted(changes))
        self._save()
        return True

    def toggle_completed(self, task_id: str) -> bool | None:
        """Flip the completion flag. Returns the new flag, or None if not found."""
        task = self.lookup(task_id)
        if task is None:
            logger.info("Toggle skipped: task id=%s not found", task_id)
            return None
        self.update(task_id, completed=not task.completed)
        return not task.completed

    def remove(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.info("Remove skipped: task id=%s not found", task_id)
            return False
        del self._tasks[idx]
        logger.info("Task removed id=%s", task_id)
        self._save()
        return True

    def lookup(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def list_all(self) -> list[Task]:
        """Incomplete tasks first, stored order otherwise. Does not reorder the store."""
        return sorted(self._tasks, key=lambda t: t.completed)

    def sort_by_deadline(self) -> None:
        """Incomplete first; then earliest deadline first, undated tasks last."""
        self._tasks.sort(key=self._deadline_key)
        logger.info("Tasks sorted by deadline.")
        self._save()

    def sort_by_priority(self) -> None:
        """Incomplete first; then HIGH, MEDIUM, LOW."""
        self._tasks.sort(key=self._priority_key)
        logger.info("Tasks sorted by priority.")
        self._save()

    def search_by_keyword(self, text: str) -> list[Task]:
        needle = text.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]

    def search_by_completion(self, completed: bool) -> list[Task]:
        return [t for t in self._tasks if t.completed == completed]

    def search_by_priority(self, priority: TaskPriority) -> list[Task]:
        return [t for t in self._tasks if t.priority == priority]
