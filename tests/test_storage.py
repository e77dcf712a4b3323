# tests/test_storage.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from models import Status, Task
from storage import Storage


def test_missing_file_loads_empty(storage: Storage) -> None:
    assert storage.load_all() == []


def test_save_creates_directories_and_round_trips(storage: Storage) -> None:
    tasks = [
        Task.todo("read book"),
        Task.deadline("report", datetime(2024, 3, 1, 23, 59), Status.DONE),
        Task.event("trip", datetime(2024, 5, 1, 10, 0), datetime(2024, 5, 2, 10, 0)),
    ]
    assert storage.save_all(tasks) is True
    assert storage.path.read_text(encoding="utf-8").splitlines() == [
        "T | NOT_DONE | read book",
        "D | DONE | report | 2024-03-01 23:59",
        "E | NOT_DONE | trip | 2024-05-01 10:00 | 2024-05-02 10:00",
    ]
    assert storage.load_all() == tasks


def test_corrupt_lines_are_skipped(storage: Storage, caplog) -> None:
    storage.path.parent.mkdir(parents=True)
    storage.path.write_text(
        "T | NOT_DONE | keep me\n"
        "garbage\n"
        "\n"
        "D | DONE | bad date | someday\n"
        "T | DONE | also kept\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="storage"):
        loaded = storage.load_all()
    assert [t.description for t in loaded] == ["keep me", "also kept"]
    assert sum("Skipping corrupt record" in r.getMessage() for r in caplog.records) == 2


def test_unreadable_file_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert Storage(path).load_all() == []


def test_save_failure_returns_false(tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    storage = Storage(blocker / "tasks.txt")
    with caplog.at_level(logging.ERROR, logger="storage"):
        assert storage.save_all([Task.todo("x")]) is False
    assert any("Failed to save tasks" in r.getMessage() for r in caplog.records)
