# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from command_parser import CommandParser
from storage import Storage
from task_list import TaskList
from ui import Ui


@pytest.fixture()
def storage(tmp_path: Path) -> Storage:
    return Storage(tmp_path / "data" / "tasks.txt")


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def parser(tasks: TaskList, storage: Storage) -> CommandParser:
    return CommandParser(tasks, storage, Ui())


@pytest.fixture()
def run(parser: CommandParser):
    """Feed several lines; return the response to the last one."""

    def _run(*lines: str) -> str:
        out = ""
        for line in lines:
            out = parser.interpret(line)
        return out

    return _run
