# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable, Iterator


class FakeTaskSink:
    """
    In-memory TaskSink used by manager tests.

    - lines=None behaves like a missing tasks file
    - every write_lines() call is recorded in `writes`
    - fail_reads / fail_writes raise OSError like a broken disk would
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self.lines = lines
        self.writes: list[list[str]] = []
        self.fail_reads = False
        self.fail_writes = False

    def read_lines(self) -> list[str] | None:
        if self.fail_reads:
            raise OSError("read failed")
        return None if self.lines is None else list(self.lines)

    def write_lines(self, lines: Iterable[str]) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.lines = list(lines)
        self.writes.append(list(self.lines))

    def __repr__(self) -> str:
        return "FakeTaskSink()"


class SequentialIds:
    """
    Deterministic id generator.

    Hands out the given ids first (repeats allowed, to force collisions),
    then "t0001", "t0002", ...
    """

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._preset: Iterator[str] = iter(list(ids))
        self._n = 0
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        try:
            return next(self._preset)
        except StopIteration:
            self._n += 1
            return f"t{self._n:04d}"
