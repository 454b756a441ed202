"""Application state and the events that mutate it."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from focus_matrix_mcp.enums import CheckInContext, Direction, Feeling, Quadrant, StartOutcome
from focus_matrix_mcp.models.task import EmotionalState, TaskModel


class AppState(BaseModel):
    """Everything the running session knows.

    ``pending_start`` holds the id of a task waiting on a friction
    confirmation; ``check_in`` is the open emotional check-in prompt, if any.
    """

    tasks: list[TaskModel] = Field(default_factory=list)
    emotions: list[EmotionalState] = Field(default_factory=list)
    pending_start: str | None = None
    check_in: CheckInContext | None = None


# ============================================================================
# Events
# ============================================================================


class CreateTask(BaseModel):
    kind: Literal["create_task"] = "create_task"
    content: str
    quadrant: Quadrant
    reminder: int | None = None


class AttemptStart(BaseModel):
    kind: Literal["attempt_start"] = "attempt_start"
    task_id: str


class ConfirmStart(BaseModel):
    kind: Literal["confirm_start"] = "confirm_start"
    task_id: str


class CancelStart(BaseModel):
    kind: Literal["cancel_start"] = "cancel_start"


class CompleteTask(BaseModel):
    kind: Literal["complete_task"] = "complete_task"
    task_id: str


class DeleteTask(BaseModel):
    kind: Literal["delete_task"] = "delete_task"
    task_id: str


class ReorderTask(BaseModel):
    kind: Literal["reorder_task"] = "reorder_task"
    task_id: str
    direction: Direction


class DragSwap(BaseModel):
    kind: Literal["drag_swap"] = "drag_swap"
    source_id: str
    target_id: str


class LogEmotion(BaseModel):
    kind: Literal["log_emotion"] = "log_emotion"
    feeling: Feeling
    context: CheckInContext | None = None


class ReplaceAll(BaseModel):
    """Wholesale replacement of both collections (import)."""

    kind: Literal["replace_all"] = "replace_all"
    tasks: list[TaskModel]
    emotions: list[EmotionalState]


class ClearAll(BaseModel):
    """Full data reset."""

    kind: Literal["clear_all"] = "clear_all"


Event = Annotated[
    Union[
        CreateTask,
        AttemptStart,
        ConfirmStart,
        CancelStart,
        CompleteTask,
        DeleteTask,
        ReorderTask,
        DragSwap,
        LogEmotion,
        ReplaceAll,
        ClearAll,
    ],
    Field(discriminator="kind"),
]


class EventResult(BaseModel):
    """Outcome of applying one event to a state."""

    state: AppState
    outcome: StartOutcome | None = None
    task: TaskModel | None = None
    emotion: EmotionalState | None = None
    tasks_changed: bool = False
    replaced: bool = False
