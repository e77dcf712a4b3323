"""Task list: ordered container, index validation and listing text.

Indices are 0-based here; the parser converts from the 1-based numbers the
user types. Deleting shifts every later task down by one.
"""
from typing import Iterable, Iterator, List, Optional
from models import Task


class TaskIndexError(IndexError):
    """Raised when an index does not address a task in the list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f'Task index {index} out of range for {size} task(s)')


def _count(n: int) -> str:
    return f'{n} task' if n == 1 else f'{n} tasks'


def render_listing(tasks: Iterable[Task]) -> str:
    """Number tasks from 1, one per line: ``1.[T][ ] read book``."""
    return '\n'.join(f'{n}.{task}' for n, task in enumerate(tasks, start=1))


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def is_valid_id(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def find_matches(self, keyword: str) -> List[Task]:
        """Tasks whose description contains keyword (case-sensitive)."""
        return [t for t in self._tasks if keyword in t.description]

    def list_tasks(self) -> str:
        if not self._tasks:
            return 'Your list is empty.'
        return 'Here are the tasks in your list:\n' + render_listing(self._tasks)

    # -------------------- task operations --------------------
    def add(self, task: Task) -> str:
        self._tasks.append(task)
        return (f"Got it. I've added this task:\n  {task}\n"
                f'Now you have {_count(len(self._tasks))} in the list.')

    def delete(self, index: int) -> str:
        task = self._get(index)
        del self._tasks[index]
        return (f"Noted. I've removed this task:\n  {task}\n"
                f'Now you have {_count(len(self._tasks))} in the list.')

    def mark(self, index: int) -> str:
        task = self._get(index)
        task.mark()
        return f"Nice! I've marked this task as done:\n  {task}"

    def unmark(self, index: int) -> str:
        task = self._get(index)
        task.unmark()
        return f"OK, I've marked this task as not done yet:\n  {task}"

    def _get(self, index: int) -> Task:
        # negative indices would silently address from the end
        if not self.is_valid_id(index):
            raise TaskIndexError(index, len(self._tasks))
        return self._tasks[index]
