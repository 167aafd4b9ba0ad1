# tests/test_task_codec.py

from __future__ import annotations

from datetime import date

import pytest

from todo_app.tasks.task_codec import TaskDecodeError, decode_task, encode_task
from todo_app.tasks.task_models import Task, TaskPriority


def test_encode_completed_high_with_deadline() -> None:
    task = Task(
        id="abcd1234",
        description="Test",
        deadline=date(2024, 1, 15),
        priority=TaskPriority.HIGH,
        completed=True,
    )
    assert encode_task(task) == "+ 1 Test: 2024-01-15"


def test_encode_pending_without_deadline_keeps_separator() -> None:
    task = Task(id="x", description="Buy milk", deadline=None, priority=TaskPriority.LOW)
    assert encode_task(task) == "- 3 Buy milk: "


def test_decode_restores_everything_but_id() -> None:
    tasks = [
        Task("a", "Test", date(2024, 1, 15), TaskPriority.HIGH, True),
        Task("b", "Buy milk and eggs", None, TaskPriority.LOW, False),
        Task("c", "Pay rent", date(2025, 12, 31), TaskPriority.MEDIUM, False),
    ]
    for original in tasks:
        decoded = decode_task(encode_task(original), new_id=lambda: "fresh")
        assert decoded.id == "fresh"
        assert decoded.description == original.description
        assert decoded.deadline == original.deadline
        assert decoded.priority == original.priority
        assert decoded.completed == original.completed


def test_decode_parses_fields() -> None:
    task = decode_task("- 2 Call mom: 2024-03-08", new_id=lambda: "id1")
    assert task == Task(
        id="id1",
        description="Call mom",
        deadline=date(2024, 3, 8),
        priority=TaskPriority.MEDIUM,
        completed=False,
    )


@pytest.mark.parametrize("token", ["9", "0", "high", "x"])
def test_decode_unknown_priority_falls_back_to_medium(token: str) -> None:
    task = decode_task(f"- {token} Something: ", new_id=lambda: "id1")
    assert task.priority is TaskPriority.MEDIUM
    assert task.description == "Something"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Buy milk",
        "* 1 Buy milk: ",
        "-1 Buy milk: ",
        "- 1 Buy milk",
        "- 1: 2024-01-01",
        "- 1 Buy milk: 2024-02-30",
        "- 1 Buy milk: 15.01.2024",
        "- 1 Buy milk: 2024-1-5",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(TaskDecodeError):
        decode_task(line, new_id=lambda: "id1")


def test_description_with_separator_does_not_survive_reload() -> None:
    task = Task("a", "Note: call back", None, TaskPriority.MEDIUM)
    line = encode_task(task)
    assert line == "- 2 Note: call back: "
    with pytest.raises(TaskDecodeError):
        decode_task(line, new_id=lambda: "b")


def test_decode_error_is_a_value_error_with_reason() -> None:
    with pytest.raises(ValueError) as exc_info:
        decode_task("? 1 nope: ", new_id=lambda: "id1")
    assert isinstance(exc_info.value, TaskDecodeError)
    assert exc_info.value.reason == "missing status prefix"
    assert exc_info.value.line == "? 1 nope: "
