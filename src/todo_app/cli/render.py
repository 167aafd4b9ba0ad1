# src/todo_app/cli/render.py

"""
Shell-side presentation: task lines, priority labels, and parsing of the
values a user types (display dates, priority choices).

Nothing here is used by the task manager itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from ..tasks.task_models import Task, TaskPriority

DISPLAY_DATE_FORMAT = "%d.%m.%Y"

PRIORITY_LABELS: dict[str, dict[TaskPriority, str]] = {
    "en": {
        TaskPriority.HIGH: "high",
        TaskPriority.MEDIUM: "medium",
        TaskPriority.LOW: "low",
    },
    "ru": {
        TaskPriority.HIGH: "высокий",
        TaskPriority.MEDIUM: "средний",
        TaskPriority.LOW: "низкий",
    },
}

_TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "priority": "priority",
        "due": "due",
        "no_deadline": "no deadline",
        "empty": "No tasks.",
    },
    "ru": {
        "priority": "приоритет",
        "due": "срок",
        "no_deadline": "без сроков",
        "empty": "список задач пуст.",
    },
}


def _texts(language: str) -> dict[str, str]:
    return _TEXTS.get(language, _TEXTS["en"])


def priority_label(priority: TaskPriority, language: str = "en") -> str:
    return PRIORITY_LABELS.get(language, PRIORITY_LABELS["en"])[priority]


def format_date(value: date | None, language: str = "en") -> str:
    if value is None:
        return _texts(language)["no_deadline"]
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_task(task: Task, language: str = "en") -> str:
    t = _texts(language)
    mark = "[x]" if task.completed else "[ ]"
    return (
        f"{mark} (ID: {task.id}) | {t['priority']}: {priority_label(task.priority, language)}"
        f" | {t['due']}: {format_date(task.deadline, language)} | {task.description}"
    )


def format_task_list(tasks: Iterable[Task], title: str, language: str = "en") -> str:
    items = list(tasks)
    if not items:
        return _texts(language)["empty"]
    lines = [f"--- {title} ---"]
    lines.extend(format_task(t, language) for t in items)
    return "\n".join(lines)


def parse_display_date(raw: str) -> date:
    """Parse DD.MM.YYYY. Raises ValueError on anything else."""
    return datetime.strptime(raw.strip(), DISPLAY_DATE_FORMAT).date()


def parse_priority(raw: str) -> TaskPriority:
    """
    Accept "1"/"2"/"3", enum names ("high") or any known label ("низкий").
    Unlike the storage lookup this is strict: raises ValueError.
    """
    s = raw.strip().lower()
    for priority in TaskPriority:
        if s == priority.token or s == priority.name.lower():
            return priority
    for labels in PRIORITY_LABELS.values():
        for priority, label in labels.items():
            if s == label:
                return priority
    raise ValueError(f"unknown priority: {raw!r}")
