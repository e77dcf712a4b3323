"""Error kinds and the explicit result type returned by command handlers.

Handlers never raise for bad input; they return an Outcome carrying either
response text or an ErrorKind. CommandParser.interpret turns it into text.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Recoverable input errors; the value is the user-facing message."""
    # structural
    NO_DESC = 'OOPS!!! The description of a task cannot be empty.'
    NO_TASK_ID = 'OOPS!!! Please specify a task number.'
    INVALID_TASK_ID = 'OOPS!!! That task number does not exist in your list.'
    INVALID_DEADLINE = 'OOPS!!! A deadline must be given as: deadline <description> /by <YYYY-MM-DD HH:mm>'
    INVALID_EVENT = 'OOPS!!! An event must be given as: event <description> /from <start> /to <end>'
    NO_START = 'OOPS!!! Please specify when the event starts (/from <YYYY-MM-DD HH:mm>).'
    NO_END = 'OOPS!!! Please specify when the event ends (/to <YYYY-MM-DD HH:mm>).'
    INVALID_FIND_TASK = 'OOPS!!! Please search with exactly one keyword: find <keyword>'
    INVALID_COMMAND = "OOPS!!! I'm sorry, but I don't know what that means :-("
    # semantic
    INVALID_START_END = 'OOPS!!! An event cannot start after it ends.'

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Outcome:
    """Result of one command handler.

    Exactly one of ``text``/``error`` is set. ``mutated`` is True only when
    the task list changed, which is what triggers a save.
    """
    text: Optional[str] = None
    error: Optional[ErrorKind] = None
    mutated: bool = False

    @classmethod
    def ok(cls, text: str, mutated: bool = False) -> Outcome:
        return cls(text=text, mutated=mutated)

    @classmethod
    def fail(cls, error: ErrorKind) -> Outcome:
        return cls(error=error)

    def render(self) -> str:
        if self.error is not None:
            return self.error.message
        return self.text or ''
