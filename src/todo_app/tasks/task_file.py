# src/todo_app/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class TaskFile:
    """
    Plain-text task file: one encoded task per newline-terminated line.

    Every write replaces the whole file: the lines go to "<name>.tmp" first,
    then os.replace() swaps it in, so a crash mid-write leaves the old file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_lines(self) -> list[str] | None:
        """
        Lines split on newlines only (\\n, \\r\\n, \\r), without the terminator.

        Undecodable bytes become U+FFFD so one bad line cannot block the load.
        """
        if not self._path.exists():
            logger.info("Tasks file %s not found, starting with an empty list.", self._path)
            return None
        with self._path.open("r", encoding="utf-8", errors="replace") as f:
            return [line[:-1] if line.endswith("\n") else line for line in f]

    def write_lines(self, lines: Iterable[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
            os.replace(tmp, self._path)
        except Exception:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Tasks written to %s", self._path)

    def __repr__(self) -> str:
        return f"TaskFile({str(self._path)!r})"
