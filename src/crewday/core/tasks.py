"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import time
from enum import Enum

from .errors import InvalidDescription, InvalidPriority, InvalidTimeFormat, InvalidTimeRange

_TIME_PATTERN = re.compile(r"^([0-9]{2}):([0-9]{2})$")


class Priority(Enum):
    """Task priority. Has no effect on scheduling or conflicts."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Case-insensitive lookup of high/medium/low."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise InvalidPriority(text) from None


@dataclass
class Task:
    """A single task in the day's schedule."""

    description: str
    start_time: time
    end_time: time
    priority: Priority
    completed: bool = False

    def matches(self, description: str) -> bool:
        """Case-insensitive exact match on description, ignoring surrounding whitespace."""
        return self.description.casefold() == description.strip().casefold()

    def format(self) -> str:
        base = (
            f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}: "
            f"{self.description} [{self.priority.value}]"
        )
        if self.completed:
            base += " (Completed)"
        return base

    def __str__(self) -> str:
        return self.format()


def parse_time(text: str) -> time:
    """Parse zero-padded 24h HH:mm text."""
    match = _TIME_PATTERN.match(text.strip())
    if not match:
        raise InvalidTimeFormat(text)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(text)
    return time(hour, minute)


def create_task(description: str, start: str, end: str, priority: str) -> Task:
    """
    Build a validated Task from console input.

    Raises:
        InvalidDescription: description is blank
        InvalidTimeFormat: start or end is not HH:mm in 00:00-23:59
        InvalidTimeRange: end is not strictly after start
        InvalidPriority: priority is not high/medium/low
    """
    description = description.strip()
    if not description:
        raise InvalidDescription()

    start_time = parse_time(start)
    end_time = parse_time(end)
    if end_time <= start_time:
        raise InvalidTimeRange()

    return Task(
        description=description,
        start_time=start_time,
        end_time=end_time,
        priority=Priority.parse(priority),
    )


def tasks_conflict(a: Task, b: Task) -> bool:
    """
    Check if two tasks overlap.

    Boundaries are inclusive: a task ending at 08:00 conflicts with one
    starting at 08:00.
    """
    return not (a.end_time < b.start_time or a.start_time > b.end_time)


def sort_by_start(tasks: list[Task]) -> list[Task]:
    """Sort tasks by start time. Stable for equal start times."""
    return sorted(tasks, key=lambda t: t.start_time)


def filter_by_priority(tasks: list[Task], priority: Priority) -> list[Task]:
    """Filter tasks to one priority, ordered by start time."""
    return sort_by_start([t for t in tasks if t.priority == priority])
