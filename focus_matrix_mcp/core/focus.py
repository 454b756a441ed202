"""Focus state machine: BACKLOG -> IN_PROGRESS -> DONE with a single focus slot."""

import logging
import random
from typing import Protocol

from focus_matrix_mcp.core.errors import FocusOccupiedError, InvalidTransitionError, TaskNotFoundError
from focus_matrix_mcp.core.ordering import top_priority_task
from focus_matrix_mcp.enums import StartOutcome, TaskStatus
from focus_matrix_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


def _find(tasks: list[TaskModel], task_id: str) -> TaskModel:
    for task in tasks:
        if task.id == task_id:
            return task
    raise TaskNotFoundError(task_id)


def active_task(tasks: list[TaskModel]) -> TaskModel | None:
    """The task occupying the focus slot, if any."""
    return next((t for t in tasks if t.status == TaskStatus.IN_PROGRESS), None)


def attempt_start(tasks: list[TaskModel], task_id: str) -> StartOutcome:
    """
    Decide what happens when the user asks to start a task.

    Does not change anything; the caller applies start_task() on STARTED and
    holds the task for confirmation on PENDING_CONFIRMATION.

    Raises:
        TaskNotFoundError: unknown id
        InvalidTransitionError: the task is not in the backlog
    """
    task = _find(tasks, task_id)
    if active_task(tasks) is not None:
        return StartOutcome.BLOCKED
    if task.status != TaskStatus.BACKLOG:
        raise InvalidTransitionError(f"Task '{task_id}' is {task.status.value} and cannot be started")

    top = top_priority_task(tasks)
    if top is not None and top.id != task_id:
        logger.debug("Start of %s needs confirmation, top priority is %s", task_id, top.id)
        return StartOutcome.PENDING_CONFIRMATION
    return StartOutcome.STARTED


def start_task(tasks: list[TaskModel], task_id: str) -> list[TaskModel]:
    """Move a backlog task into the focus slot. Timestamps are left as they are."""
    task = _find(tasks, task_id)
    active = active_task(tasks)
    if active is not None:
        raise FocusOccupiedError(active.id)
    if task.status != TaskStatus.BACKLOG:
        raise InvalidTransitionError(f"Task '{task_id}' is {task.status.value} and cannot be started")

    return [t.model_copy(update={"status": TaskStatus.IN_PROGRESS}) if t.id == task_id else t for t in tasks]


def complete_task(tasks: list[TaskModel], task_id: str, now: int) -> list[TaskModel]:
    """Finish the in-progress task, stamping ``completed_at``."""
    task = _find(tasks, task_id)
    if task.status != TaskStatus.IN_PROGRESS:
        raise InvalidTransitionError(f"Only the in-progress task can be completed; '{task_id}' is {task.status.value}")

    update = {"status": TaskStatus.DONE, "completed_at": now}
    return [t.model_copy(update=update) if t.id == task_id else t for t in tasks]


def delete_task(tasks: list[TaskModel], task_id: str) -> list[TaskModel]:
    """Hard-delete a task from any status. Unknown ids are a no-op."""
    return [t for t in tasks if t.id != task_id]


# ============================================================================
# Post-completion check-in policies
# ============================================================================


class CheckInPolicy(Protocol):
    def should_prompt(self) -> bool: ...


class RandomCheckInPolicy:
    """Prompt when a random draw exceeds ``threshold`` (0.6 prompts ~40% of the time)."""

    def __init__(self, threshold: float = 0.6, rng: random.Random | None = None):
        self.threshold = threshold
        self._rng = rng or random.Random()

    def should_prompt(self) -> bool:
        return self._rng.random() > self.threshold


class EveryNthCheckInPolicy:
    """Prompt on every ``n``-th completion."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("n must be at least 1")
        self.n = n
        self._count = 0

    def should_prompt(self) -> bool:
        self._count += 1
        return self._count % self.n == 0


class NeverCheckInPolicy:
    def should_prompt(self) -> bool:
        return False
