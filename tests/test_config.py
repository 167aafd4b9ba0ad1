# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_app.config import Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_LOG_TO_FILE",
    "TODO_LANGUAGE",
    "TODO_DATA_DIR",
    "TODO_TASKS_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.language == "en"
    assert s.data_dir == Path(".local/todo")
    assert s.tasks_path == Path(".local/todo/tasks.txt")


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_LANGUAGE", "RU")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_TO_FILE", "no")

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.language == "ru"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False


def test_explicit_tasks_path_and_bad_language(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("TODO_TASKS_PATH", str(tmp_path / "my.txt"))
    monkeypatch.setenv("TODO_LANGUAGE", "klingon")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "my.txt"
    assert s.language == "en"
