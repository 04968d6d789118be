"""Functional core - task rules and the in-memory day schedule."""

from .errors import (
    ScheduleError,
    InvalidDescription,
    InvalidTimeFormat,
    InvalidTimeRange,
    InvalidPriority,
    TaskConflict,
    TaskNotFound,
)
from .tasks import Task, Priority, create_task, parse_time, tasks_conflict, sort_by_start, filter_by_priority
from .schedule import TaskStore, conflict_message

__all__ = [
    # Errors
    "ScheduleError",
    "InvalidDescription",
    "InvalidTimeFormat",
    "InvalidTimeRange",
    "InvalidPriority",
    "TaskConflict",
    "TaskNotFound",
    # Tasks
    "Task",
    "Priority",
    "create_task",
    "parse_time",
    "tasks_conflict",
    "sort_by_start",
    "filter_by_priority",
    # Schedule
    "TaskStore",
    "conflict_message",
]
