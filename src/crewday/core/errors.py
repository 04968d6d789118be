"""Schedule error kinds.

Every failure is recoverable: callers catch ScheduleError and report it.
"""


class ScheduleError(Exception):
    """Base class for all schedule failures."""


class InvalidDescription(ScheduleError, ValueError):
    def __init__(self):
        super().__init__("Description must not be empty.")


class InvalidTimeFormat(ScheduleError, ValueError):
    def __init__(self, text: str = ""):
        self.text = text
        super().__init__("Invalid time format. Use HH:mm (00:00 - 23:59).")


class InvalidTimeRange(ScheduleError, ValueError):
    def __init__(self):
        super().__init__("End time must be after start time.")


class InvalidPriority(ScheduleError, ValueError):
    def __init__(self, text: str = ""):
        self.text = text
        super().__init__("Invalid priority. Use High, Medium, or Low.")


class TaskConflict(ScheduleError):
    """Insertion rejected because the task overlaps an existing one."""

    def __init__(self, message: str = "Task conflicts with an existing task."):
        super().__init__(message)


class TaskNotFound(ScheduleError):
    def __init__(self, description: str = ""):
        self.description = description
        super().__init__("Task not found.")
