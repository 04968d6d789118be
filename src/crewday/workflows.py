"""Shared workflow layer between the console and the task store.

Each function takes raw console input, runs it through the task factory
and the store, and returns the text to show. Failures raise ScheduleError.
"""

from .adapters.console_sink import ConsoleConflictSink
from .adapters.log_sink import LoggingConflictSink
from .config import Config
from .core.errors import TaskConflict, TaskNotFound
from .core.schedule import TaskStore, conflict_message
from .core.tasks import Priority, Task, create_task


def build_store(config: Config) -> TaskStore:
    """Create an empty store with the sinks the config asks for."""
    store = TaskStore()
    if config.echo_conflicts:
        store.add_sink(ConsoleConflictSink())
    if config.log_conflicts:
        store.add_sink(LoggingConflictSink())
    return store


def format_tasks(tasks: list[Task]) -> str:
    return "\n".join(t.format() for t in tasks)


def add_task(store: TaskStore, description: str, start: str, end: str, priority: str) -> str:
    task = create_task(description, start, end, priority)
    if not store.add_task(task):
        existing = store.find_conflict(task)
        raise TaskConflict(conflict_message(existing) if existing else "Task conflicts with an existing task.")
    return "Task added successfully. No conflicts."


def remove_task(store: TaskStore, description: str) -> str:
    if not store.remove_task(description):
        raise TaskNotFound(description)
    return "Task removed successfully."


def edit_task(
    store: TaskStore,
    old_description: str,
    description: str,
    start: str,
    end: str,
    priority: str,
) -> str:
    """Replace a task wholesale. The replacement is validated but not conflict-checked."""
    updated = create_task(description, start, end, priority)
    if not store.edit_task(old_description, updated):
        raise TaskNotFound(old_description)
    return "Task updated successfully."


def complete_task(store: TaskStore, description: str) -> str:
    if not store.mark_completed(description):
        raise TaskNotFound(description)
    return "Task marked as completed."


def list_tasks(store: TaskStore) -> str:
    tasks = store.view_all()
    if not tasks:
        return "No tasks scheduled for the day."
    return format_tasks(tasks)


def list_by_priority(store: TaskStore, priority: str) -> str:
    level = Priority.parse(priority)
    tasks = store.view_by_priority(level)
    if not tasks:
        return f"No tasks with priority {level.value}."
    return format_tasks(tasks)
