"""Exceptions raised by the focus core."""


class FocusError(Exception):
    """Base class for focus board errors."""


class TaskNotFoundError(FocusError):
    def __init__(self, task_id: str):
        super().__init__(f"Task '{task_id}' not found")
        self.task_id = task_id


class InvalidTransitionError(FocusError):
    """A status change the lifecycle BACKLOG -> IN_PROGRESS -> DONE does not allow."""


class FocusOccupiedError(FocusError):
    def __init__(self, active_id: str):
        super().__init__("Another task is already in progress. Complete it before starting a new one.")
        self.active_id = active_id


class NoPendingStartError(FocusError):
    """Confirmation was requested for a task that is not awaiting one."""


class ImportParseError(FocusError):
    """The import text could not be parsed; nothing was applied."""
