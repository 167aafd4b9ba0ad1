# src/todo_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import TaskPriority
from ..tasks.task_store import UNSET
from .render import format_task, format_task_list, parse_display_date, parse_priority

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

_OPTION_KEYS = ("due", "prio", "done")
_YES = ("+", "yes", "y", "true", "1")
_NO = ("-", "no", "n", "false", "0")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
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

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


class _UsageError(ValueError):
    pass


def _split_options(args: list[str]) -> tuple[list[str], dict[str, str]]:
    """Separate "key=value" options (due=, prio=, done=) from free text words."""
    words: list[str] = []
    opts: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if sep and key.lower() in _OPTION_KEYS:
            opts[key.lower()] = value
        else:
            words.append(arg)
    return words, opts


def _parse_flag(raw: str) -> bool:
    s = raw.strip().lower()
    if s in _YES:
        return True
    if s in _NO:
        return False
    raise _UsageError(f"Expected + or -, got {raw!r}.")


def _parse_due(raw: str):
    try:
        return parse_display_date(raw)
    except ValueError:
        raise _UsageError("Invalid date. Use the DD.MM.YYYY format.") from None


def _parse_prio(raw: str) -> TaskPriority:
    try:
        return parse_priority(raw)
    except ValueError:
        raise _UsageError("Invalid priority. Use 1 (high), 2 (medium) or 3 (low).") from None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <description> [due=DD.MM.YYYY] [prio=1|2|3]
    """
    words, opts = _split_options(args)
    description = " ".join(words).strip()
    if not description:
        return "Description cannot be empty. Usage: /add <text> [due=DD.MM.YYYY] [prio=1-3]"

    try:
        deadline = _parse_due(opts["due"]) if opts.get("due") else None
        priority = _parse_prio(opts["prio"]) if opts.get("prio") else TaskPriority.MEDIUM
    except _UsageError as e:
        return str(e)

    task_id = state.tasks.add(description, deadline, priority)
    return f"Task added (ID: {task_id})."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> [new description] [due=DD.MM.YYYY|-] [prio=1|2|3] [done=+|-]

    Omitted parts stay as they are; due=- removes the deadline.
    """
    if not args:
        return "Usage: /edit <id> [text] [due=DD.MM.YYYY|-] [prio=1-3] [done=+|-]"

    task_id, rest = args[0], args[1:]
    words, opts = _split_options(rest)

    deadline = UNSET
    priority = UNSET
    completed = UNSET
    try:
        if "due" in opts:
            deadline = None if opts["due"] in ("", "-") else _parse_due(opts["due"])
        if opts.get("prio"):
            priority = _parse_prio(opts["prio"])
        if opts.get("done"):
            completed = _parse_flag(opts["done"])
    except _UsageError as e:
        return str(e)

    ok = state.tasks.update(
        task_id,
        description=" ".join(words),
        deadline=deadline,
        priority=priority,
        completed=completed,
    )
    if not ok:
        return f"Task not found: {task_id}"
    task = state.tasks.lookup(task_id)
    return f"Task updated: {format_task(task, state.language)}" if task else "Task updated."


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"
    task_id = args[0]
    if state.tasks.remove(task_id):
        return f"Task {task_id} removed."
    return f"Task not found: {task_id}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <id>  -> toggle completion status
    """
    if len(args) != 1:
        return "Usage: /done <id>"
    new_status = state.tasks.toggle_completed(args[0])
    if new_status is None:
        return f"Task not found: {args[0]}"
    return f"Task {args[0]} marked as {'done' if new_status else 'not done'}."


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state.tasks.list_all(), "all tasks", state.language)


def cmd_sort(state: AppState, args: list[str]) -> str:
    """
    /sort date  -> by deadline
    /sort prio  -> by priority
    """
    sub = args[0].lower() if args else ""
    if sub in ("date", "due", "deadline"):
        state.tasks.sort_by_deadline()
        title = "sorted by deadline"
    elif sub in ("prio", "priority"):
        state.tasks.sort_by_priority()
        title = "sorted by priority"
    else:
        return "Usage: /sort date | /sort prio"
    return format_task_list(state.tasks.list_all(), title, state.language)


def cmd_find(state: AppState, args: list[str]) -> str:
    """
    /find text <keyword>
    /find done +|-
    /find prio 1|2|3
    """
    usage = "Usage: /find text <keyword> | /find done +|- | /find prio 1-3"
    if len(args) < 2:
        return usage

    sub, rest = args[0].lower(), args[1:]
    try:
        if sub == "text":
            keyword = " ".join(rest)
            found = state.tasks.search_by_keyword(keyword)
            title = f"search results: '{keyword}'"
        elif sub == "done":
            flag = _parse_flag(rest[0])
            found = state.tasks.search_by_completion(flag)
            title = "completed tasks" if flag else "open tasks"
        elif sub == "prio":
            priority = _parse_prio(rest[0])
            found = state.tasks.search_by_priority(priority)
            title = f"priority {priority.name.lower()}"
        else:
            return usage
    except _UsageError as e:
        return str(e)

    if not found:
        return "No tasks found."
    return format_task_list(found, title, state.language)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <text> [due=DD.MM.YYYY] [prio=1-3]."
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit <id> [text] [due=DD.MM.YYYY|-] [prio=1-3] [done=+|-].",
)
registry.register("rm", cmd_remove, help_text="Remove a task: /rm <id>.", aliases=["del"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.")
registry.register("list", cmd_list, help_text="Show all tasks (open first).", aliases=["ls"])
registry.register("sort", cmd_sort, help_text="Sort tasks: /sort date | /sort prio.")
registry.register(
    "find", cmd_find, help_text="Search: /find text <kw> | /find done +|- | /find prio 1-3."
)
