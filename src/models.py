"""Data models for the task tracker.

A single Task dataclass covers all three kinds (todo, deadline, event); the
``kind`` tag decides which date fields are set. Use the ``Task.todo``,
``Task.deadline`` and ``Task.event`` constructors rather than building the
dataclass directly.

Date-times are always minute precision and use one fixed text format for
input, display and persistence: ``YYYY-MM-DD HH:mm``.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

DATETIME_FORMAT = '%Y-%m-%d %H:%M'
DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")
FIELD_SEP = ' | '


class InvalidStartEndError(ValueError):
    """Raised when an event would start after it ends."""


class Kind(Enum):
    TODO = 'T'
    DEADLINE = 'D'
    EVENT = 'E'


DATE_FIELDS = {Kind.TODO: 0, Kind.DEADLINE: 1, Kind.EVENT: 2}


class Status(Enum):
    DONE = 'DONE'
    NOT_DONE = 'NOT_DONE'

    @property
    def marker(self) -> str:
        return '[X]' if self is Status.DONE else '[ ]'


def parse_datetime(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:mm``; raise ValueError on any deviation.

    strptime alone accepts single-digit fields, so the shape is checked first.
    """
    if not DATETIME_RE.fullmatch(text):
        raise ValueError(f'Invalid date-time: {text!r}')
    return datetime.strptime(text, DATETIME_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


@dataclass
class Task:
    """A single tracked task.

    Fields:
        kind: TODO, DEADLINE or EVENT.
        description: Non-blank text, stored as given.
        status: DONE or NOT_DONE (new tasks start NOT_DONE).
        due: Deadline only.
        start, end: Event only; start must not be after end.
    """
    kind: Kind
    description: str
    status: Status = Status.NOT_DONE
    due: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError('Task description must not be blank')
        if self.kind is Kind.TODO:
            if self.due or self.start or self.end:
                raise ValueError('A todo carries no dates')
        elif self.kind is Kind.DEADLINE:
            if self.due is None or self.start or self.end:
                raise ValueError('A deadline needs exactly one due date')
        elif self.kind is Kind.EVENT:
            if self.start is None or self.end is None or self.due:
                raise ValueError('An event needs a start and an end')
            if self.start > self.end:
                raise InvalidStartEndError(
                    f'Event starts ({format_datetime(self.start)}) after it ends '
                    f'({format_datetime(self.end)})')

    # -------------------- constructors --------------------
    @classmethod
    def todo(cls, description: str, status: Status = Status.NOT_DONE) -> Task:
        return cls(Kind.TODO, description, status)

    @classmethod
    def deadline(cls, description: str, due: datetime,
                 status: Status = Status.NOT_DONE) -> Task:
        return cls(Kind.DEADLINE, description, status, due=due)

    @classmethod
    def event(cls, description: str, start: datetime, end: datetime,
              status: Status = Status.NOT_DONE) -> Task:
        return cls(Kind.EVENT, description, status, start=start, end=end)

    # -------------------- status --------------------
    def mark(self) -> None:
        self.status = Status.DONE

    def unmark(self) -> None:
        self.status = Status.NOT_DONE

    # -------------------- encodings --------------------
    def _dates(self) -> List[datetime]:
        if self.kind is Kind.DEADLINE:
            return [self.due]  # type: ignore[list-item]
        if self.kind is Kind.EVENT:
            return [self.start, self.end]  # type: ignore[list-item]
        return []

    def serialize(self) -> str:
        """Pipe-delimited record: kind | status | description | dates..."""
        fields = [self.kind.value, self.status.value, self.description]
        fields.extend(format_datetime(d) for d in self._dates())
        return FIELD_SEP.join(fields)

    @classmethod
    def deserialize(cls, line: str) -> Task:
        """Inverse of ``serialize``; raises ValueError for malformed records.

        Kind and status are taken from the front and the dates from the end,
        so a description may itself contain the field separator.
        """
        parts = line.split(FIELD_SEP, 2)
        if len(parts) < 3:
            raise ValueError(f'Too few fields in record: {line!r}')
        kind = Kind(parts[0])
        status = Status(parts[1])
        n_dates = DATE_FIELDS[kind]
        rest = parts[2].rsplit(FIELD_SEP, n_dates) if n_dates else [parts[2]]
        if len(rest) != n_dates + 1:
            raise ValueError(f'Wrong number of date fields for {kind.name}: {line!r}')
        description = rest[0]
        dates = [parse_datetime(p) for p in rest[1:]]
        if kind is Kind.DEADLINE:
            return cls.deadline(description, dates[0], status)
        if kind is Kind.EVENT:
            return cls.event(description, dates[0], dates[1], status)
        return cls.todo(description, status)

    def __str__(self) -> str:
        text = f'[{self.kind.value}]{self.status.marker} {self.description}'
        if self.kind is Kind.DEADLINE:
            text += f' (by: {format_datetime(self.due)})'  # type: ignore[arg-type]
        elif self.kind is Kind.EVENT:
            text += (f' (from: {format_datetime(self.start)}'  # type: ignore[arg-type]
                     f' to: {format_datetime(self.end)})')  # type: ignore[arg-type]
        return text
