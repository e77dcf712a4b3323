"""Persistence helpers (load/save) for the task list.

One task per line in the pipe-delimited form produced by Task.serialize,
e.g. ``D | NOT_DONE | submit report | 2024-03-01 23:59``. Loading never
fails the session: a missing or unreadable file yields an empty list and
corrupt lines are skipped.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Union

from models import Task

DEFAULT_TASKS_FILE = Path('data') / 'tasks.txt'

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load_all(self) -> List[Task]:
        """Read every task from disk. Missing file -> empty list."""
        if not self.path.exists():
            logger.info('No task file at %s; starting with an empty list', self.path)
            return []
        try:
            lines = self.path.read_text(encoding='utf-8').splitlines()
        except (OSError, UnicodeDecodeError):
            logger.warning('Could not read %s; starting with an empty list',
                           self.path, exc_info=True)
            return []
        tasks: List[Task] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(Task.deserialize(line))
            except ValueError as exc:
                logger.warning('Skipping corrupt record %s:%d: %s', self.path, lineno, exc)
        logger.debug('Loaded %d task(s) from %s', len(tasks), self.path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the file with the full list; False if the write failed."""
        text = ''.join(task.serialize() + '\n' for task in tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding='utf-8')
        except OSError:
            logger.exception('Failed to save tasks to %s', self.path)
            return False
        logger.debug('Saved tasks to %s', self.path)
        return True
