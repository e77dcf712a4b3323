"""Command interpretation: one input line in, one response text out.

Each command has its own small grammar. Checks run in a fixed order and the
first failing check decides the error reported; nothing is mutated until all
checks pass. Handlers return an Outcome, and only ``interpret`` turns it into
text, so no exception reaches the caller.

Tokens are separated by single spaces, except for ``find`` which splits on
any whitespace.
"""
import logging
import re
from typing import List, Optional

from errors import ErrorKind, Outcome
from models import InvalidStartEndError, Task, parse_datetime
from storage import Storage
from task_list import TaskIndexError, TaskList, render_listing
from ui import Ui

# digits and dots; "1.2" passes here and is rejected when converted to int
NUMBER_RE = re.compile(r"[0-9.]+")

logger = logging.getLogger(__name__)


def _split_spaces(text: str) -> List[str]:
    """Split on single spaces, dropping trailing empty fields."""
    parts = text.split(' ')
    while len(parts) > 1 and parts[-1] == '':
        parts.pop()
    return parts


def is_number(token: str) -> bool:
    return bool(NUMBER_RE.fullmatch(token))


def to_index(token: str) -> Optional[int]:
    """1-based task number -> 0-based index, or None if not an integer."""
    if not is_number(token):
        return None
    try:
        return int(token) - 1
    except ValueError:
        return None


def command_of(raw_input: str) -> str:
    return raw_input.split(' ', 1)[0]


class CommandParser:
    def __init__(self, tasks: TaskList, storage: Storage, ui: Optional[Ui] = None):
        self.tasks: TaskList = tasks
        self.storage: Storage = storage
        self.ui: Ui = ui or Ui()

    def interpret(self, raw_input: str) -> str:
        """Run one command and return its response text.

        A successful mutation is followed by a full save; if the save fails
        the change is kept in memory and a warning is appended.
        """
        outcome = self.dispatch(raw_input)
        if outcome.error is not None:
            logger.debug('Rejected %r: %s', raw_input, outcome.error.name)
            return outcome.render()
        text = outcome.render()
        if outcome.mutated and not self.storage.save_all(self.tasks):
            text += '\n' + self.ui.save_failed_warning()
        return text

    @staticmethod
    def is_exit(raw_input: str) -> bool:
        return command_of(raw_input) == 'bye'

    # -------------------- command dispatch --------------------
    def dispatch(self, raw_input: str) -> Outcome:
        cmd = command_of(raw_input)
        if cmd == 'list':
            return Outcome.ok(self.tasks.list_tasks())
        elif cmd == 'delete':
            return self._cmd_delete(raw_input)
        elif cmd == 'mark':
            return self._cmd_mark(raw_input, done=True)
        elif cmd == 'unmark':
            return self._cmd_mark(raw_input, done=False)
        elif cmd == 'todo':
            return self._cmd_todo(raw_input)
        elif cmd == 'deadline':
            return self._cmd_deadline(raw_input)
        elif cmd == 'event':
            return self._cmd_event(raw_input)
        elif cmd == 'find':
            return self._cmd_find(raw_input)
        elif cmd == 'bye':
            return Outcome.ok(self.ui.farewell())
        return Outcome.fail(ErrorKind.INVALID_COMMAND)

    # ---- individual command helpers ----
    def _cmd_delete(self, raw_input: str) -> Outcome:
        tokens = _split_spaces(raw_input)
        if len(tokens) == 1:
            return Outcome.fail(ErrorKind.NO_TASK_ID)
        index = to_index(tokens[1])
        if index is None:
            return Outcome.fail(ErrorKind.INVALID_TASK_ID)
        try:
            return Outcome.ok(self.tasks.delete(index), mutated=True)
        except TaskIndexError:
            return Outcome.fail(ErrorKind.INVALID_TASK_ID)

    def _cmd_mark(self, raw_input: str, done: bool) -> Outcome:
        parts = raw_input.split(' ', 1)
        if len(parts) == 1 or not parts[1]:
            return Outcome.fail(ErrorKind.NO_TASK_ID)
        index = to_index(parts[1])
        if index is None or not self.tasks.is_valid_id(index):
            return Outcome.fail(ErrorKind.INVALID_TASK_ID)
        text = self.tasks.mark(index) if done else self.tasks.unmark(index)
        return Outcome.ok(text, mutated=True)

    def _cmd_todo(self, raw_input: str) -> Outcome:
        parts = raw_input.split(' ', 1)
        if len(parts) == 1 or not parts[1].strip():
            return Outcome.fail(ErrorKind.NO_DESC)
        return Outcome.ok(self.tasks.add(Task.todo(parts[1])), mutated=True)

    def _cmd_deadline(self, raw_input: str) -> Outcome:
        parts = raw_input.split(' ', 1)
        # a blank remainder has no " /by " and falls through to INVALID_DEADLINE
        if len(parts) == 1:
            return Outcome.fail(ErrorKind.NO_DESC)
        details = parts[1].split(' /by ', 1)
        if len(details) < 2:
            return Outcome.fail(ErrorKind.INVALID_DEADLINE)
        desc, when = details
        if not desc.strip():
            return Outcome.fail(ErrorKind.NO_DESC)
        try:
            due = parse_datetime(when)
        except ValueError:
            return Outcome.ok(self.ui.invalid_date_format_message())
        return Outcome.ok(self.tasks.add(Task.deadline(desc, due)), mutated=True)

    def _cmd_event(self, raw_input: str) -> Outcome:
        parts = raw_input.split(' ', 1)
        if len(parts) == 1 or not parts[1].strip():
            return Outcome.fail(ErrorKind.NO_DESC)
        details = parts[1].split('/from', 1)
        if not details[0].strip():
            return Outcome.fail(ErrorKind.NO_DESC)
        if len(details) == 1:
            return Outcome.fail(ErrorKind.INVALID_EVENT)
        desc = details[0].strip()
        dates = details[1].split('/to')
        start = dates[0].strip()
        if not start:
            return Outcome.fail(ErrorKind.NO_START)
        if len(dates) == 1:
            return Outcome.fail(ErrorKind.NO_END)
        end = dates[1].strip()
        if not end:
            return Outcome.fail(ErrorKind.NO_END)
        try:
            start_at = parse_datetime(start)
            end_at = parse_datetime(end)
        except ValueError:
            return Outcome.ok(self.ui.invalid_date_format_message())
        try:
            task = Task.event(desc, start_at, end_at)
        except InvalidStartEndError:
            return Outcome.fail(ErrorKind.INVALID_START_END)
        return Outcome.ok(self.tasks.add(task), mutated=True)

    def _cmd_find(self, raw_input: str) -> Outcome:
        tokens = raw_input.split()
        if len(tokens) != 2:
            return Outcome.fail(ErrorKind.INVALID_FIND_TASK)
        matches = self.tasks.find_matches(tokens[1])
        return Outcome.ok(self.ui.render_matches(render_listing(matches)))
