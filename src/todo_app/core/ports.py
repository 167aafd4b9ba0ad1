# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task manager.

The manager depends on Protocols instead of concrete implementations.
This keeps storage and id generation swappable and makes testing easier
(fixed id sequences, in-memory sinks).
"""

from collections.abc import Iterable
from typing import Protocol


class IdGenerator(Protocol):
    """Returns a new candidate task id. Uniqueness is checked by the caller."""
    def __call__(self) -> str: ...


class TaskSink(Protocol):
    """
    Where the task lines live.

    read_lines() returns None when nothing has been stored yet
    (that is an empty store, not an error). Both methods may raise OSError.
    """

    def read_lines(self) -> list[str] | None: ...
    def write_lines(self, lines: Iterable[str]) -> None: ...
