# tests/test_task_list.py

from __future__ import annotations

import pytest

from models import Status, Task
from task_list import TaskIndexError, TaskList, render_listing


def _list(*descriptions: str) -> TaskList:
    return TaskList(Task.todo(d) for d in descriptions)


def test_add_appends_and_confirms() -> None:
    tasks = _list("a")
    reply = tasks.add(Task.todo("b"))
    assert [t.description for t in tasks] == ["a", "b"]
    assert "[T][ ] b" in reply
    assert "Now you have 2 tasks in the list." in reply


def test_add_singular_count() -> None:
    assert "Now you have 1 task in the list." in TaskList().add(Task.todo("a"))


def test_delete_shifts_later_tasks_down() -> None:
    tasks = _list("a", "b", "c")
    reply = tasks.delete(0)
    assert [t.description for t in tasks] == ["b", "c"]
    assert "[T][ ] a" in reply
    assert tasks[0].description == "b"


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_delete_out_of_range(index: int) -> None:
    tasks = _list("a", "b", "c")
    with pytest.raises(TaskIndexError):
        tasks.delete(index)
    assert len(tasks) == 3


def test_mark_unmark_in_place() -> None:
    tasks = _list("a")
    assert "[T][X] a" in tasks.mark(0)
    assert tasks[0].status is Status.DONE
    assert "[T][ ] a" in tasks.unmark(0)
    assert tasks[0].status is Status.NOT_DONE


def test_is_valid_id_bounds() -> None:
    tasks = _list("a", "b")
    assert tasks.is_valid_id(0)
    assert tasks.is_valid_id(1)
    assert not tasks.is_valid_id(2)
    assert not tasks.is_valid_id(-1)


def test_find_matches_is_case_sensitive_substring_in_order() -> None:
    tasks = _list("read book", "buy milk", "return Book", "bookshelf")
    assert [t.description for t in tasks.find_matches("book")] == ["read book", "bookshelf"]
    assert tasks.find_matches("nothing") == []


def test_list_tasks_numbers_from_one() -> None:
    tasks = _list("a", "b")
    tasks.mark(1)
    assert tasks.list_tasks() == "Here are the tasks in your list:\n1.[T][ ] a\n2.[T][X] b"


def test_list_tasks_empty() -> None:
    assert TaskList().list_tasks() == "Your list is empty."


def test_render_listing_empty() -> None:
    assert render_listing([]) == ""
