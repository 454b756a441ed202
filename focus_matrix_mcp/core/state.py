"""Single-dispatcher application state and the session that persists it."""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Protocol

from focus_matrix_mcp.core.errors import FocusOccupiedError, NoPendingStartError
from focus_matrix_mcp.core.focus import (
    CheckInPolicy,
    RandomCheckInPolicy,
    attempt_start,
    complete_task,
    delete_task,
    start_task,
)
from focus_matrix_mcp.core.ordering import derive_views, migrate_missing_order
from focus_matrix_mcp.core.reorder import drag_swap, next_order, reorder
from focus_matrix_mcp.enums import CheckInContext, StartOutcome, TaskStatus
from focus_matrix_mcp.models.state import (
    AppState,
    AttemptStart,
    CancelStart,
    ClearAll,
    CompleteTask,
    ConfirmStart,
    CreateTask,
    DeleteTask,
    DragSwap,
    Event,
    EventResult,
    LogEmotion,
    ReorderTask,
    ReplaceAll,
)
from focus_matrix_mcp.models.task import EmotionalState, TaskModel
from focus_matrix_mcp.models.views import BoardViews

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def apply_event(state: AppState, event: Event, *, now: int, policy: CheckInPolicy) -> EventResult:
    """
    Apply one event to ``state`` and return the resulting state.

    ``state`` is never mutated. Core errors (unknown task, invalid transition,
    missing confirmation) propagate to the caller with ``state`` untouched.

    Args:
        state: Current application state
        event: Any member of the ``Event`` union
        now: Current time in epoch milliseconds
        policy: Decides whether a completion opens a check-in prompt

    Returns:
        EventResult describing the new state and what changed
    """
    tasks = state.tasks

    if isinstance(event, CreateTask):
        task = TaskModel(
            id=str(uuid.uuid4()),
            content=event.content,
            quadrant=event.quadrant,
            status=TaskStatus.BACKLOG,
            created_at=now,
            order=next_order(tasks, event.quadrant),
            reminder=event.reminder,
        )
        new_state = state.model_copy(update={"tasks": [*tasks, task]})
        return EventResult(state=new_state, task=task, tasks_changed=True)

    if isinstance(event, AttemptStart):
        outcome = attempt_start(tasks, event.task_id)
        if outcome == StartOutcome.STARTED:
            tasks = start_task(tasks, event.task_id)
            new_state = state.model_copy(update={"tasks": tasks, "pending_start": None})
            return EventResult(state=new_state, outcome=outcome, task=_by_id(tasks, event.task_id), tasks_changed=True)
        if outcome == StartOutcome.PENDING_CONFIRMATION:
            new_state = state.model_copy(update={"pending_start": event.task_id})
            return EventResult(state=new_state, outcome=outcome, task=_by_id(tasks, event.task_id))
        return EventResult(state=state, outcome=outcome, task=_by_id(tasks, event.task_id))

    if isinstance(event, ConfirmStart):
        if state.pending_start != event.task_id:
            raise NoPendingStartError(f"Task '{event.task_id}' is not awaiting start confirmation")
        cleared = state.model_copy(update={"pending_start": None})
        try:
            tasks = start_task(tasks, event.task_id)
        except FocusOccupiedError:
            return EventResult(state=cleared, outcome=StartOutcome.BLOCKED, task=_by_id(tasks, event.task_id))
        new_state = cleared.model_copy(update={"tasks": tasks})
        return EventResult(
            state=new_state, outcome=StartOutcome.STARTED, task=_by_id(tasks, event.task_id), tasks_changed=True
        )

    if isinstance(event, CancelStart):
        return EventResult(state=state.model_copy(update={"pending_start": None}))

    if isinstance(event, CompleteTask):
        tasks = complete_task(tasks, event.task_id, now)
        update: dict = {"tasks": tasks}
        if policy.should_prompt():
            update["check_in"] = CheckInContext.COMPLETION
        return EventResult(state=state.model_copy(update=update), task=_by_id(tasks, event.task_id), tasks_changed=True)

    if isinstance(event, DeleteTask):
        remaining = delete_task(tasks, event.task_id)
        if len(remaining) == len(tasks):
            return EventResult(state=state)
        update = {"tasks": remaining}
        if state.pending_start == event.task_id:
            update["pending_start"] = None
        return EventResult(state=state.model_copy(update=update), tasks_changed=True)

    if isinstance(event, ReorderTask):
        reordered = reorder(tasks, event.task_id, event.direction)
        if reordered is tasks:
            return EventResult(state=state)
        return EventResult(state=state.model_copy(update={"tasks": reordered}), tasks_changed=True)

    if isinstance(event, DragSwap):
        swapped = drag_swap(tasks, event.source_id, event.target_id)
        if swapped is tasks:
            return EventResult(state=state)
        return EventResult(state=state.model_copy(update={"tasks": swapped}), tasks_changed=True)

    if isinstance(event, LogEmotion):
        entry = EmotionalState(
            timestamp=now,
            feeling=event.feeling,
            context=event.context or state.check_in or CheckInContext.STARTUP,
        )
        new_state = state.model_copy(update={"emotions": [*state.emotions, entry], "check_in": None})
        return EventResult(state=new_state, emotion=entry)

    if isinstance(event, ReplaceAll):
        tasks, _ = migrate_missing_order(list(event.tasks))
        new_state = AppState(tasks=tasks, emotions=list(event.emotions))
        return EventResult(state=new_state, tasks_changed=True, replaced=True)

    if isinstance(event, ClearAll):
        return EventResult(state=AppState(), tasks_changed=True, replaced=True)

    raise TypeError(f"Unsupported event: {type(event).__name__}")


def _by_id(tasks: list[TaskModel], task_id: str) -> TaskModel | None:
    return next((t for t in tasks if t.id == task_id), None)


# ============================================================================
# Session
# ============================================================================


class Store(Protocol):
    def load_tasks(self) -> list[TaskModel]: ...

    def save_tasks(self, tasks: list[TaskModel]) -> bool: ...

    def load_emotions(self) -> list[EmotionalState]: ...

    def save_emotion(self, entry: EmotionalState) -> bool: ...

    def replace_emotions(self, emotions: list[EmotionalState]) -> bool: ...

    def clear(self) -> bool: ...


class FocusSession:
    """
    Holds the live AppState and routes every event through apply_event().

    After each accepted event the session persists what changed. Store
    failures are logged by the store and never roll back the in-memory
    state, which stays authoritative for the running session.
    """

    def __init__(
        self,
        store: Store,
        state: AppState | None = None,
        policy: CheckInPolicy | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.state = state or AppState()
        self.policy = policy or RandomCheckInPolicy()
        self.clock = clock

    @classmethod
    def load(
        cls,
        store: Store,
        policy: CheckInPolicy | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> "FocusSession":
        """Load persisted data, migrate legacy ordering and open the startup check-in."""
        tasks, migrated = migrate_missing_order(store.load_tasks())
        if migrated:
            store.save_tasks(tasks)
        state = AppState(
            tasks=tasks,
            emotions=store.load_emotions(),
            check_in=CheckInContext.STARTUP if tasks else None,
        )
        logger.info("Loaded %d task(s) and %d check-in(s)", len(state.tasks), len(state.emotions))
        return cls(store, state=state, policy=policy, clock=clock)

    @property
    def tasks(self) -> list[TaskModel]:
        return self.state.tasks

    def views(self) -> BoardViews:
        return derive_views(self.state.tasks)

    def get_task(self, task_id: str) -> TaskModel | None:
        return _by_id(self.state.tasks, task_id)

    def dispatch(self, event: Event) -> EventResult:
        result = apply_event(self.state, event, now=self.clock(), policy=self.policy)
        self.state = result.state
        self._persist(event, result)
        logger.debug("Applied %s (outcome=%s)", event.kind, result.outcome)
        return result

    def _persist(self, event: Event, result: EventResult) -> None:
        if isinstance(event, ClearAll):
            self.store.clear()
            return
        if result.replaced:
            self.store.save_tasks(result.state.tasks)
            self.store.replace_emotions(result.state.emotions)
            return
        if result.tasks_changed:
            self.store.save_tasks(result.state.tasks)
        if result.emotion is not None:
            self.store.save_emotion(result.emotion)
