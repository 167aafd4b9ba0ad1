# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.core.state import AppState
from todo_app.tasks.task_store import TaskManager

from .fakes import FakeTaskSink, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        language="en",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def sink() -> FakeTaskSink:
    return FakeTaskSink()


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def manager(sink: FakeTaskSink, ids: SequentialIds) -> TaskManager:
    return TaskManager(sink, id_factory=ids)


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TaskManager) -> AppState:
    """AppState wired with the in-memory sink and predictable ids (t0001, t0002, ...)."""
    return AppState(settings=settings, tasks=manager, language="en")
