"""In-memory store for one day's tasks."""

import logging
from typing import Iterable, Iterator

from crewday.ports.conflict_sink import ConflictSink

from .tasks import Priority, Task, filter_by_priority, sort_by_start, tasks_conflict

logger = logging.getLogger(__name__)


def conflict_message(existing: Task) -> str:
    return f'Task conflicts with existing task "{existing.description}".'


class TaskStore:
    """
    Holds the tasks for a single day and rejects overlapping insertions.

    Owned by the calling session and passed explicitly; there is no global
    instance. Failures are reported as False return values.
    """

    def __init__(self, sinks: Iterable[ConflictSink] | None = None):
        self._tasks: list[Task] = []
        self._sinks: list[ConflictSink] = list(sinks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def sinks(self) -> list[ConflictSink]:
        return list(self._sinks)

    def add_sink(self, sink: ConflictSink) -> None:
        """Register a sink to be told about rejected insertions."""
        self._sinks.append(sink)

    def _notify(self, message: str) -> None:
        for sink in self._sinks:
            try:
                sink.notify_conflict(message)
            except Exception:
                logger.exception(f"Conflict sink {sink!r} failed")

    def find_conflict(self, task: Task) -> Task | None:
        """First existing task (in store order) that overlaps the given one."""
        for existing in self._tasks:
            if tasks_conflict(task, existing):
                return existing
        return None

    def find(self, description: str) -> Task | None:
        """First task whose description matches, ignoring case."""
        for task in self._tasks:
            if task.matches(description):
                return task
        return None

    def _index_of(self, description: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.matches(description):
                return i
        return None

    def add_task(self, task: Task) -> bool:
        """Append the task unless it conflicts with one already stored."""
        existing = self.find_conflict(task)
        if existing is not None:
            message = conflict_message(existing)
            logger.warning(message)
            self._notify(message)
            return False

        self._tasks.append(task)
        logger.info(f"Task added: {task.description}")
        return True

    def remove_task(self, description: str) -> bool:
        i = self._index_of(description)
        if i is None:
            logger.warning(f"Remove failed: {description}")
            return False
        del self._tasks[i]
        logger.info(f"Task removed: {description}")
        return True

    def edit_task(self, description: str, updated: Task) -> bool:
        """
        Replace the matching task in place.

        The replacement is not checked for conflicts against other tasks.
        """
        i = self._index_of(description)
        if i is None:
            logger.warning(f"Edit failed: {description}")
            return False
        self._tasks[i] = updated
        logger.info(f"Task updated: {description}")
        return True

    def mark_completed(self, description: str) -> bool:
        """Mark the matching task completed. Re-marking is a no-op success."""
        task = self.find(description)
        if task is None:
            logger.warning(f"Complete failed: {description}")
            return False
        task.completed = True
        logger.info(f"Task completed: {description}")
        return True

    def view_all(self) -> list[Task]:
        """All tasks ordered by start time."""
        return sort_by_start(self._tasks)

    def view_by_priority(self, priority: Priority) -> list[Task]:
        """Tasks of one priority ordered by start time."""
        return filter_by_priority(self._tasks, priority)
